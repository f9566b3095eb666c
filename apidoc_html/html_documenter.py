"""Renders an API model as a linked set of static HTML pages.

Every documentable item gets its own page: a breadcrumb, a heading, the
summary and signature, and tables that link to the pages of its members.
Pages are written depth first, parent before children.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from apidoc_html.api_item import ApiItem, ApiItemKind, ReleaseTag
from apidoc_html.concise_signature import concise_signature
from apidoc_html.documenter_feature import (
    DocumenterAccessor,
    DocumenterFeatureContext,
    FinishedEventArgs,
)
from apidoc_html.emit_html import emit
from apidoc_html.errors import FilenameCollisionError, UnsupportedApiItemKindError
from apidoc_html.file_system import copy_file, ensure_empty_folder, write_file
from apidoc_html.filename_for_api_item import filename_for_api_item, link_for_api_item
from apidoc_html.html_table import HtmlTable, table
from apidoc_html.html_tree import HtmlNode, a, tag, tr
from apidoc_html.load_config import DocumenterConfig
from apidoc_html.plugin_loader import PluginLoader
from apidoc_html.render_doc_nodes import render_doc_nodes
from apidoc_html.unscoped_package_name import unscoped_package_name

STYLESHEET_SOURCE = Path(__file__).with_name("styles.css")

# Heading text per page kind; "{name}" is the scoped name within the package.
HEADING_TEMPLATES: dict[ApiItemKind, str] = {
    ApiItemKind.MODEL: "{name} API Reference",
    ApiItemKind.PACKAGE: "{name} package",
    ApiItemKind.NAMESPACE: "{name} namespace",
    ApiItemKind.CLASS: "{name} class",
    ApiItemKind.INTERFACE: "{name} interface",
    ApiItemKind.ENUM: "{name} enum",
    ApiItemKind.CONSTRUCTOR: "{name}",
    ApiItemKind.CONSTRUCT_SIGNATURE: "{name}",
    ApiItemKind.METHOD: "{name} method",
    ApiItemKind.METHOD_SIGNATURE: "{name} method",
    ApiItemKind.FUNCTION: "{name} function",
    ApiItemKind.PROPERTY: "{name} property",
    ApiItemKind.PROPERTY_SIGNATURE: "{name} property",
    ApiItemKind.TYPE_ALIAS: "{name} type",
    ApiItemKind.VARIABLE: "{name} variable",
}

# Kinds whose remarks come right after the summary instead of after the tables.
REMARKS_FIRST_KINDS = frozenset(
    {
        ApiItemKind.CLASS,
        ApiItemKind.INTERFACE,
        ApiItemKind.NAMESPACE,
        ApiItemKind.PACKAGE,
    },
)

BodyWriter = Callable[["HtmlDocumenter", list[HtmlNode], ApiItem], list[ApiItem]]


class HtmlDocumenter:
    """Writes one HTML file per documentable item of an API model."""

    def __init__(
        self,
        api_model: ApiItem,
        documenter_config: DocumenterConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Prepare a documenter for ``api_model``.

        Plugins are only loaded when ``documenter_config`` is given. Progress
        and warnings go to ``logger`` (the module logger by default).
        """
        self._api_model = api_model
        self._documenter_config = documenter_config
        self._config = documenter_config or DocumenterConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._plugin_loader = PluginLoader(self._logger)
        self._output_folder = Path()
        self.written_files: list[Path] = []
        self._page_owners: dict[Path, ApiItem] = {}

    def generate_files(self, output_folder: str | Path) -> list[Path]:
        """Clear ``output_folder`` and write the whole site into it."""
        self._output_folder = Path(output_folder)
        self.written_files = []
        self._page_owners = {}

        if self._documenter_config is not None:
            self._plugin_loader.load(
                self._documenter_config,
                lambda: DocumenterFeatureContext(
                    api_model=self._api_model,
                    output_folder=self._output_folder,
                    documenter=DocumenterAccessor(self.get_link_for_api_item),
                ),
            )

        self._delete_old_output_files()
        copy_file(
            STYLESHEET_SOURCE,
            self._output_folder / self._config.stylesheet,
            self._logger,
        )

        self._write_api_item_page(self._api_model)

        feature = self._plugin_loader.documenter_feature
        if feature is not None:
            feature.on_finished(
                FinishedEventArgs(written_files=list(self.written_files)),
            )

        self._logger.info(
            "Generated %d HTML pages into: %s",
            len(self.written_files),
            self._output_folder,
        )
        return self.written_files

    def get_link_for_api_item(self, item: ApiItem) -> str:
        """Return the relative link of the page written for ``item``."""
        return link_for_api_item(item)

    def _write_api_item_page(self, item: ApiItem) -> None:
        output: list[HtmlNode] = []

        self._write_breadcrumb(output, item)
        output.append(tag("h1", "page-header", self._heading_for(item)))

        if item.release_tag == ReleaseTag.BETA:
            self._write_beta_warning(output)

        if item.doc_comment is not None:
            summary = render_doc_nodes(item.doc_comment.summary_section, self._logger)
            output.append(tag("div", "summary", summary))

        if item.excerpt.strip():
            output.append(tag("div", "signature-heading", "Signature"))
            output.append(tag("pre", "signature", item.get_excerpt_with_modifiers()))

        remarks_first = item.kind in REMARKS_FIRST_KINDS
        if remarks_first:
            self._write_remarks_section(output, item)

        body_writer = self._body_writers.get(item.kind)
        if body_writer is None:
            raise UnsupportedApiItemKindError(item.kind)
        children = body_writer(self, output, item)

        if not remarks_first:
            self._write_remarks_section(output, item)

        self._write_page(item, output)

        for child in children:
            self._write_api_item_page(child)

    def _heading_for(self, item: ApiItem) -> str:
        template = HEADING_TEMPLATES.get(item.kind)
        if template is None:
            raise UnsupportedApiItemKindError(item.kind)
        if item.kind == ApiItemKind.PACKAGE:
            self._logger.info("Writing %s package", item.display_name)
            return template.format(name=unscoped_package_name(item.display_name))
        return template.format(name=item.get_scoped_name_within_package())

    def _write_page(self, item: ApiItem, output: list[HtmlNode]) -> None:
        page_content = emit(
            [self._config.stylesheet],
            [
                tag(
                    "header",
                    [
                        tag(
                            "div",
                            "header-top",
                            [a("", self._config.header_logo_href, "header-logo")],
                        ),
                        tag("div", "header-bottom", []),
                    ],
                ),
                tag("div", "main", output),
            ],
        )
        filename = self._output_folder / filename_for_api_item(item)
        owner = self._page_owners.get(filename)
        if owner is not None:
            msg = (
                f"{filename.name} would hold both {_describe(owner)} "
                f"and {_describe(item)}"
            )
            raise FilenameCollisionError(msg)
        self._page_owners[filename] = item
        write_file(filename, page_content, self._config.newline_kind)
        self.written_files.append(filename)
        self._logger.debug("Wrote %s", filename)

    def _write_remarks_section(self, output: list[HtmlNode], item: ApiItem) -> None:
        doc_comment = item.doc_comment
        if doc_comment is not None and doc_comment.remarks_block is not None:
            output.append(tag("div", "remarks", "Remarks"))
            output.append(
                tag("div", render_doc_nodes(doc_comment.remarks_block, self._logger)),
            )

    def _write_beta_warning(self, output: list[HtmlNode]) -> None:
        # The notice text is not published yet; only the block is emitted.
        output.append(tag("div", "beta-warning", []))

    def _write_breadcrumb(self, output: list[HtmlNode], item: ApiItem) -> None:
        output.append(
            a("Home", self.get_link_for_api_item(self._api_model), "breadcrumb"),
        )
        hierarchy = item.get_hierarchy()
        start = 0
        for i, level in enumerate(hierarchy):
            if level.kind in (ApiItemKind.MODEL, ApiItemKind.ENTRY_POINT):
                start = i + 1
        for level in hierarchy[start:]:
            output.append(tag("span", "breadcrumb", " / "))
            output.append(
                a(level.display_name, self.get_link_for_api_item(level), "breadcrumb"),
            )

    # -----------------------------
    # Kind-specific bodies
    # -----------------------------

    def _write_model_table(
        self,
        output: list[HtmlNode],
        api_model: ApiItem,
    ) -> list[ApiItem]:
        packages_table = table(["Package", "Description"])
        children: list[ApiItem] = []

        for member in api_model.members:
            self._check_member_kind(member)
            if member.kind == ApiItemKind.PACKAGE:
                packages_table.add_row(
                    tr([self._title_cell(member), self._description_cell(member)]),
                )
                children.append(member)

        self._write_table(output, "Packages", packages_table)
        return children

    def _write_package_or_namespace_tables(
        self,
        output: list[HtmlNode],
        container: ApiItem,
    ) -> list[ApiItem]:
        tables: dict[ApiItemKind, tuple[str, HtmlTable]] = {
            ApiItemKind.CLASS: ("Classes", table(["Class", "Description"])),
            ApiItemKind.ENUM: ("Enumerations", table(["Enumeration", "Description"])),
            ApiItemKind.FUNCTION: ("Functions", table(["Function", "Description"])),
            ApiItemKind.INTERFACE: ("Interfaces", table(["Interface", "Description"])),
            ApiItemKind.NAMESPACE: ("Namespaces", table(["Namespace", "Description"])),
            ApiItemKind.VARIABLE: ("Variables", table(["Variable", "Description"])),
            ApiItemKind.TYPE_ALIAS: ("Types", table(["Type Alias", "Description"])),
        }

        if container.kind == ApiItemKind.PACKAGE:
            entry_points = container.entry_points
            members = entry_points[0].members if entry_points else []
        else:
            members = container.members

        children: list[ApiItem] = []
        for member in members:
            self._check_member_kind(member)
            routed = tables.get(member.kind)
            if routed is None:
                continue
            routed[1].add_row(
                tr([self._title_cell(member), self._description_cell(member)]),
            )
            children.append(member)

        for title, member_table in tables.values():
            self._write_table(output, title, member_table)
        return children

    def _write_class_tables(
        self,
        output: list[HtmlNode],
        api_class: ApiItem,
    ) -> list[ApiItem]:
        events_table = table(["Property", "Modifiers", "Type", "Description"])
        constructors_table = table(["Constructor", "Modifiers", "Description"])
        properties_table = table(["Property", "Modifiers", "Type", "Description"])
        methods_table = table(["Method", "Modifiers", "Description"])
        children: list[ApiItem] = []

        for member in api_class.members:
            self._check_member_kind(member)
            if member.kind == ApiItemKind.CONSTRUCTOR:
                constructors_table.add_row(
                    tr(
                        [
                            self._title_cell(member),
                            self._modifiers_cell(member),
                            self._description_cell(member),
                        ],
                    ),
                )
            elif member.kind == ApiItemKind.METHOD:
                methods_table.add_row(
                    tr(
                        [
                            self._title_cell(member),
                            self._modifiers_cell(member),
                            self._description_cell(member),
                        ],
                    ),
                )
            elif member.kind == ApiItemKind.PROPERTY:
                target = events_table if member.is_event_property else properties_table
                target.add_row(
                    tr(
                        [
                            self._title_cell(member),
                            self._modifiers_cell(member),
                            self._property_type_cell(member),
                            self._description_cell(member),
                        ],
                    ),
                )
            else:
                continue
            children.append(member)

        self._write_table(output, "Events", events_table)
        self._write_table(output, "Constructors", constructors_table)
        self._write_table(output, "Properties", properties_table)
        self._write_table(output, "Methods", methods_table)
        return children

    def _write_interface_tables(
        self,
        output: list[HtmlNode],
        api_interface: ApiItem,
    ) -> list[ApiItem]:
        events_table = table(["Property", "Type", "Description"])
        properties_table = table(["Property", "Type", "Description"])
        methods_table = table(["Method", "Description"])
        children: list[ApiItem] = []

        for member in api_interface.members:
            self._check_member_kind(member)
            if member.kind in (
                ApiItemKind.CONSTRUCT_SIGNATURE,
                ApiItemKind.METHOD_SIGNATURE,
            ):
                methods_table.add_row(
                    tr([self._title_cell(member), self._description_cell(member)]),
                )
            elif member.kind == ApiItemKind.PROPERTY_SIGNATURE:
                target = events_table if member.is_event_property else properties_table
                target.add_row(
                    tr(
                        [
                            self._title_cell(member),
                            self._property_type_cell(member),
                            self._description_cell(member),
                        ],
                    ),
                )
            else:
                continue
            children.append(member)

        self._write_table(output, "Events", events_table)
        self._write_table(output, "Properties", properties_table)
        self._write_table(output, "Methods", methods_table)
        return children

    def _write_enum_tables(
        self,
        output: list[HtmlNode],
        api_enum: ApiItem,
    ) -> list[ApiItem]:
        enum_members_table = table(["Member", "Value", "Description"])

        for member in api_enum.members:
            self._check_member_kind(member)
            enum_members_table.add_row(
                tr(
                    [
                        concise_signature(member),
                        member.initializer,
                        self._description_cell(member),
                    ],
                ),
            )

        self._write_table(output, "Enumeration Members", enum_members_table)
        # Enum members are documented inline and get no page of their own.
        return []

    def _write_parameter_tables(
        self,
        output: list[HtmlNode],
        item: ApiItem,
    ) -> list[ApiItem]:
        parameters_table = table(["Parameter", "Type", "Description"])

        for parameter in item.parameters:
            parameters_table.add_row(tr([parameter.name, parameter.type_text]))

        self._write_table(output, "Parameters", parameters_table)
        return []

    def _write_nothing(
        self,
        output: list[HtmlNode],
        item: ApiItem,
    ) -> list[ApiItem]:
        return []

    _body_writers: dict[ApiItemKind, BodyWriter] = {
        ApiItemKind.MODEL: _write_model_table,
        ApiItemKind.PACKAGE: _write_package_or_namespace_tables,
        ApiItemKind.NAMESPACE: _write_package_or_namespace_tables,
        ApiItemKind.CLASS: _write_class_tables,
        ApiItemKind.INTERFACE: _write_interface_tables,
        ApiItemKind.ENUM: _write_enum_tables,
        ApiItemKind.CONSTRUCTOR: _write_parameter_tables,
        ApiItemKind.CONSTRUCT_SIGNATURE: _write_parameter_tables,
        ApiItemKind.METHOD: _write_parameter_tables,
        ApiItemKind.METHOD_SIGNATURE: _write_parameter_tables,
        ApiItemKind.FUNCTION: _write_parameter_tables,
        ApiItemKind.PROPERTY: _write_nothing,
        ApiItemKind.PROPERTY_SIGNATURE: _write_nothing,
        ApiItemKind.TYPE_ALIAS: _write_nothing,
        ApiItemKind.VARIABLE: _write_nothing,
    }

    # -----------------------------
    # Table cells
    # -----------------------------

    def _check_member_kind(self, member: ApiItem) -> None:
        # Known kinds a container does not list are skipped; unknown ones abort.
        if not isinstance(member.kind, ApiItemKind):
            raise UnsupportedApiItemKindError(member.kind)

    def _write_table(
        self,
        output: list[HtmlNode],
        title: str,
        member_table: HtmlTable,
    ) -> None:
        if member_table.row_count > 0:
            output.append(tag("h3", "section-heading", title))
            output.append(member_table.to_node())

    def _title_cell(self, item: ApiItem) -> HtmlNode:
        return a(concise_signature(item), self.get_link_for_api_item(item), "ref")

    def _description_cell(self, item: ApiItem) -> HtmlNode:
        if item.doc_comment is not None:
            return tag(
                "div",
                "description",
                render_doc_nodes(item.doc_comment.summary_section, self._logger),
            )
        return tag("div", "description", [])

    def _modifiers_cell(self, item: ApiItem) -> HtmlNode:
        if item.is_static:
            return tag("code", "modifiers", "static")
        return tag("div", "modifiers", [])

    def _property_type_cell(self, item: ApiItem) -> HtmlNode:
        return tag("code", "type", item.property_type)

    def _delete_old_output_files(self) -> None:
        self._logger.info("Deleting old output from %s", self._output_folder)
        ensure_empty_folder(self._output_folder)


def _describe(item: ApiItem) -> str:
    kind = getattr(item.kind, "value", item.kind)
    return f"{kind} {item.get_scoped_name_within_package()!r}"


_unhandled_kinds =set(HEADING_TEMPLATES) ^ set(HtmlDocumenter._body_writers)
if _unhandled_kinds:
    msg = f"Page kinds missing a heading or body handler: {sorted(_unhandled_kinds)}"
    raise RuntimeError(msg)
