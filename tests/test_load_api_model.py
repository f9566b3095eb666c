"""Tests for loading serialized API models."""

import json
from pathlib import Path

import pytest

from apidoc_html.api_item import ApiItemKind, ReleaseTag
from apidoc_html.doc_nodes import (
    DocCodeSpan,
    DocLinkTag,
    DocParagraph,
    DocPlainText,
    DocSoftBreak,
)
from apidoc_html.errors import ApiModelError, UnsupportedDocNodeKindError
from apidoc_html.load_api_model import (
    build_api_item,
    find_model_files,
    load_api_model,
)
from apidoc_html.render_doc_nodes import render_doc_nodes

WIDGETS_YML = """\
kind: Package
name: "@scope/widgets"
members:
  - kind: Class
    name: Widget
    releaseTag: Beta
    excerpt: export declare class Widget
    docComment:
      summary:
        - kind: Paragraph
          nodes:
            - {kind: PlainText, text: "A widget "}
            - {kind: CodeSpan, code: "new Widget()"}
            - {kind: SoftBreak}
            - {kind: LinkTag, linkText: docs, url: "https://example.com"}
      remarks: Use sparingly.
    members:
      - kind: Method
        name: doThing
        isStatic: true
        overloadIndex: 2
        modifiers: [static]
        parameters:
          - {name: x, type: number}
  - kind: Enum
    name: Color
    members:
      - {kind: EnumMember, name: Red, initializer: '"red"'}
"""


def write_model(folder: Path, name: str, content: str) -> Path:
    """Write a model file and return its path."""
    path = folder / name
    path.write_text(content, encoding="utf-8")
    return path


def test_load_package_with_implicit_entry_point(tmp_path: Path) -> None:
    """Verify the tree built from a single package file."""
    model = load_api_model([write_model(tmp_path, "widgets.api.yml", WIDGETS_YML)])

    assert model.kind is ApiItemKind.MODEL
    (package,) = model.members
    assert package.kind is ApiItemKind.PACKAGE
    assert package.display_name == "@scope/widgets"
    assert package.parent is model

    (entry_point,) = package.entry_points
    assert entry_point.display_name == ""
    widget, color = entry_point.members
    assert widget.kind is ApiItemKind.CLASS
    assert widget.release_tag is ReleaseTag.BETA
    assert widget.excerpt == "export declare class Widget"
    assert color.members[0].initializer == '"red"'

    (method,) = widget.members
    assert method.parent is widget
    assert method.is_static
    assert method.overload_index == 2
    assert method.modifiers == ["static"]
    assert [(p.name, p.type_text) for p in method.parameters] == [("x", "number")]
    assert method.get_scoped_name_within_package() == "Widget.doThing"


def test_doc_comment_nodes(tmp_path: Path) -> None:
    """Verify doc comment parsing including the plain string shorthand."""
    model = load_api_model([write_model(tmp_path, "widgets.api.yml", WIDGETS_YML)])
    widget = model.members[0].entry_points[0].members[0]
    doc = widget.doc_comment
    assert doc is not None

    (paragraph,) = doc.summary_section
    assert isinstance(paragraph, DocParagraph)
    assert [type(n) for n in paragraph.nodes] == [
        DocPlainText,
        DocCodeSpan,
        DocSoftBreak,
        DocLinkTag,
    ]
    link = paragraph.nodes[3]
    assert isinstance(link, DocLinkTag)
    assert link.url_destination == "https://example.com"

    assert doc.remarks_block is not None
    (remarks,) = doc.remarks_block
    assert isinstance(remarks, DocParagraph)
    assert remarks.nodes == [DocPlainText(text="Use sparingly.")]


def test_json_file_with_packages_list(tmp_path: Path) -> None:
    """Verify JSON input holding several packages with explicit entry points."""
    doc = {
        "packages": [
            {"kind": "Package", "name": "alpha", "members": []},
            {
                "kind": "Package",
                "name": "beta",
                "entryPoints": [
                    {
                        "kind": "EntryPoint",
                        "name": "",
                        "members": [{"kind": "Function", "name": "go"}],
                    },
                ],
            },
        ],
    }
    path = write_model(tmp_path, "all.api.json", json.dumps(doc))

    model = load_api_model([path])

    assert [p.display_name for p in model.members] == ["alpha", "beta"]
    beta = model.members[1]
    assert len(beta.entry_points) == 1
    assert beta.entry_points[0].members[0].kind is ApiItemKind.FUNCTION


def test_find_model_files(tmp_path: Path) -> None:
    """Verify the file patterns searched in a folder."""
    nested = tmp_path / "nested"
    nested.mkdir()
    write_model(tmp_path, "a.api.yml", WIDGETS_YML)
    write_model(nested, "b.api.json", "{}")
    write_model(tmp_path, "notes.yml", "x: 1")

    assert find_model_files(tmp_path) == [
        tmp_path / "a.api.yml",
        nested / "b.api.json",
    ]


@pytest.mark.parametrize(
    ("content", "match"),
    [
        (
            "kind: Package\nname: p\nmembers:\n  - kind: Widget\n",
            "Unknown API item kind",
        ),
        ("kind: Class\nname: C\n", "must be a Package"),
        ("kind: Package\nname: p\nreleaseTag: Gamma\n", "Unknown release tag"),
        ("- not\n- a mapping\n", "Expected a mapping"),
        ("kind: Package\nname: [unclosed\n", "Could not parse"),
        (
            "kind: Package\nname: p\nmembers:\n"
            "  - {kind: Function, name: f, overloadIndex: two}\n",
            "overloadIndex must be an integer",
        ),
        (
            "kind: Package\nname: p\nmembers:\n"
            "  - {kind: Function, name: f, parameters: [x]}\n",
            "Expected a parameter mapping",
        ),
    ],
)
def test_invalid_models_raise(tmp_path: Path, content: str, match: str) -> None:
    """Verify that malformed model files are reported as ApiModelError."""
    path = write_model(tmp_path, "bad.api.yml", content)
    with pytest.raises(ApiModelError, match=match):
        load_api_model([path])


def test_unknown_doc_node_kind_is_rejected_when_rendered() -> None:
    """Verify that an unknown doc node survives loading but fails rendering."""
    item = build_api_item(
        {
            "kind": "Function",
            "name": "f",
            "docComment": {"summary": [{"kind": "BlockTag"}]},
        },
    )
    assert item.doc_comment is not None
    with pytest.raises(UnsupportedDocNodeKindError, match="BlockTag"):
        render_doc_nodes(item.doc_comment.summary_section)
