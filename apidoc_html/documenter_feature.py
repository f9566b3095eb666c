"""Extension points offered to plugins."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from apidoc_html.api_item import ApiItem


class DocumenterAccessor:
    """Lets a plugin ask the documenter about the pages it writes."""

    def __init__(self, get_link_for_api_item: Callable[[ApiItem], str]) -> None:
        """Wrap the documenter callback."""
        self._get_link_for_api_item = get_link_for_api_item

    def get_link_for_api_item(self, item: ApiItem) -> str:
        """Return the relative link of the page generated for ``item``."""
        return self._get_link_for_api_item(item)


@dataclass
class DocumenterFeatureContext:
    """What a feature receives when it is constructed."""

    api_model: ApiItem
    output_folder: Path
    documenter: DocumenterAccessor


@dataclass
class FinishedEventArgs:
    """Arguments passed to ``DocumenterFeature.on_finished``."""

    written_files: list[Path] = field(default_factory=list)


class DocumenterFeature:
    """Base class for plugin features; subclasses override the hooks they need."""

    def __init__(self, context: DocumenterFeatureContext) -> None:
        """Keep the context for later hooks."""
        self.context = context

    def on_initialized(self) -> None:
        """Run once after the feature has been constructed."""

    def on_finished(self, event_args: FinishedEventArgs) -> None:
        """Run once after every page has been written."""


ContextFactory = Callable[[], DocumenterFeatureContext]
