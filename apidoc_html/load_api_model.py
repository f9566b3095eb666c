"""Loading of serialized API models from YAML or JSON files.

Each file describes one package, or several under a top-level ``packages``
list. JSON input is read with the YAML loader, which accepts it unchanged.

A package looks like::

    kind: Package
    name: "@scope/widgets"
    members:
      - kind: Class
        name: Widget
        docComment:
          summary:
            - kind: Paragraph
              nodes: [{kind: PlainText, text: A widget.}]
        members:
          - kind: Method
            name: doThing
            excerpt: "doThing(x: number): void;"
            parameters: [{name: x, type: number}]

Package members may also be grouped under ``entryPoints``; otherwise a
single unnamed entry point is created for them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from apidoc_html.api_item import ApiItem, ApiItemKind, ApiParameter, ReleaseTag
from apidoc_html.doc_nodes import (
    DocCodeSpan,
    DocComment,
    DocLinkTag,
    DocNode,
    DocNodeKind,
    DocParagraph,
    DocPlainText,
    DocSoftBreak,
)
from apidoc_html.errors import ApiModelError

logger = logging.getLogger(__name__)

MODEL_FILE_PATTERNS = ("*.api.yml", "*.api.yaml", "*.api.json")


def find_model_files(folder: Path) -> list[Path]:
    """Return the model files under ``folder``, sorted by path."""
    found: set[Path] = set()
    for pattern in MODEL_FILE_PATTERNS:
        found.update(folder.rglob(pattern))
    return sorted(found)


def load_model_document(path: Path) -> dict[str, Any]:
    """Parse one model file into a mapping."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        msg = f"Could not parse {path}: {e}"
        raise ApiModelError(msg) from e
    if not isinstance(doc, dict):
        msg = f"Expected a mapping at the top of {path}"
        raise ApiModelError(msg)
    return doc


def load_api_model(paths: list[Path], name: str = "") -> ApiItem:
    """Build a Model item holding every package found in ``paths``."""
    model = ApiItem(kind=ApiItemKind.MODEL, display_name=name)
    for path in paths:
        doc = load_model_document(path)
        packages = doc.get("packages") if "packages" in doc else [doc]
        if not isinstance(packages, list):
            msg = f"'packages' must be a list in {path}"
            raise ApiModelError(msg)
        for raw_package in packages:
            package = build_api_item(raw_package, source=path)
            if package.kind != ApiItemKind.PACKAGE:
                msg = f"Top-level item in {path} must be a Package, got {package.kind}"
                raise ApiModelError(msg)
            model.add_member(package)
            logger.debug("Loaded package %s from %s", package.display_name, path)
    return model


def build_api_item(raw: Any, source: Path | None = None) -> ApiItem:
    """Recursively build an ``ApiItem`` from its serialized mapping."""
    if not isinstance(raw, dict):
        msg = f"Expected an item mapping in {source}, got {raw!r}"
        raise ApiModelError(msg)

    kind = _parse_kind(raw.get("kind"), source)
    name = str(raw.get("name") or "")
    item = ApiItem(
        kind=kind,
        display_name=name,
        doc_comment=_build_doc_comment(raw.get("docComment"), source),
        excerpt=str(raw.get("excerpt") or ""),
        modifiers=[str(m) for m in raw.get("modifiers") or []],
        release_tag=_parse_release_tag(raw.get("releaseTag"), source),
        parameters=_build_parameters(raw.get("parameters"), source),
        overload_index=_parse_overload_index(raw.get("overloadIndex"), source),
        is_static=bool(raw.get("isStatic")),
        is_event_property=bool(raw.get("isEventProperty")),
        property_type=str(raw.get("propertyType") or ""),
        initializer=str(raw.get("initializer") or ""),
    )

    if kind == ApiItemKind.PACKAGE and "entryPoints" not in raw:
        container = item.add_member(
            ApiItem(kind=ApiItemKind.ENTRY_POINT, display_name=""),
        )
        children = raw.get("members") or []
    else:
        container = item
        children = raw.get("entryPoints") or raw.get("members") or []

    for child in children:
        container.add_member(build_api_item(child, source))
    return item


def _parse_kind(value: Any, source: Path | None) -> ApiItemKind:
    try:
        return ApiItemKind(str(value))
    except ValueError:
        msg = f"Unknown API item kind {value!r} in {source}"
        raise ApiModelError(msg) from None


def _parse_overload_index(value: Any, source: Path | None) -> int:
    if value is None:
        return 1
    try:
        return int(value)
    except (TypeError, ValueError):
        msg = f"overloadIndex must be an integer in {source}, got {value!r}"
        raise ApiModelError(msg) from None


def _build_parameters(raw: Any, source: Path | None) -> list[ApiParameter]:
    parameters: list[ApiParameter] = []
    for p in raw or []:
        if not isinstance(p, dict):
            msg = f"Expected a parameter mapping in {source}, got {p!r}"
            raise ApiModelError(msg)
        parameters.append(
            ApiParameter(
                name=str(p.get("name") or ""),
                type_text=str(p.get("type") or ""),
            ),
        )
    return parameters


def _parse_release_tag(value: Any, source: Path | None) -> ReleaseTag | None:
    if value is None:
        return None
    try:
        return ReleaseTag(str(value))
    except ValueError:
        msg = f"Unknown release tag {value!r} in {source}"
        raise ApiModelError(msg) from None


def _build_doc_comment(raw: Any, source: Path | None) -> DocComment | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        msg = f"docComment must be a mapping in {source}"
        raise ApiModelError(msg)
    remarks = raw.get("remarks")
    return DocComment(
        summary_section=_build_doc_nodes(raw.get("summary") or [], source),
        remarks_block=None if remarks is None else _build_doc_nodes(remarks, source),
    )


def _build_doc_nodes(raw_nodes: Any, source: Path | None) -> list[DocNode]:
    if isinstance(raw_nodes, str):
        # Shorthand: a bare string is one paragraph of plain text.
        return [DocParagraph(nodes=[DocPlainText(text=raw_nodes)])]
    return [_build_doc_node(n, source) for n in raw_nodes]


def _build_doc_node(raw: Any, source: Path | None) -> DocNode:
    if not isinstance(raw, dict):
        msg = f"Expected a doc node mapping in {source}, got {raw!r}"
        raise ApiModelError(msg)
    kind = raw.get("kind")
    if kind == DocNodeKind.PARAGRAPH:
        return DocParagraph(nodes=_build_doc_nodes(raw.get("nodes") or [], source))
    if kind == DocNodeKind.SOFT_BREAK:
        return DocSoftBreak()
    if kind == DocNodeKind.CODE_SPAN:
        return DocCodeSpan(code=str(raw.get("code") or ""))
    if kind == DocNodeKind.LINK_TAG:
        return DocLinkTag(
            link_text=raw.get("linkText"),
            url_destination=raw.get("url"),
            code_destination=raw.get("codeDestination"),
        )
    if kind == DocNodeKind.PLAIN_TEXT:
        return DocPlainText(text=str(raw.get("text") or ""))
    # Unknown kinds are kept so the renderer can reject them.
    return DocNode(kind=str(kind))
