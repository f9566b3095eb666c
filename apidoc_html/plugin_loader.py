"""Loading of plugin features named in the documenter configuration."""

from __future__ import annotations

import importlib
import logging

from apidoc_html.documenter_feature import ContextFactory, DocumenterFeature
from apidoc_html.errors import PluginLoadError
from apidoc_html.load_config import DocumenterConfig

logger = logging.getLogger(__name__)


class PluginLoader:
    """Imports the configured feature and keeps the active instance."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        """Start with no feature loaded; messages go to ``log`` if given."""
        self.documenter_feature: DocumenterFeature | None = None
        self._logger = log or logger

    def load(self, config: DocumenterConfig, create_context: ContextFactory) -> None:
        """Import each configured feature class and initialize it.

        Only one feature is active at a time; a later plugin replaces an
        earlier one, matching how the page generator calls a single
        ``on_finished`` hook.
        """
        for plugin in config.plugins:
            try:
                module = importlib.import_module(plugin.module)
            except ImportError as e:
                msg = f"Error loading plugin module {plugin.module!r}: {e}"
                raise PluginLoadError(msg) from e

            feature_class = getattr(module, plugin.feature, None)
            if not isinstance(feature_class, type) or not issubclass(
                feature_class,
                DocumenterFeature,
            ):
                msg = (
                    f"{plugin.module}.{plugin.feature} is not a "
                    "DocumenterFeature subclass"
                )
                raise PluginLoadError(msg)

            if self.documenter_feature is not None:
                self._logger.warning(
                    "Replacing feature %s with %s.%s",
                    type(self.documenter_feature).__name__,
                    plugin.module,
                    plugin.feature,
                )
            feature = feature_class(create_context())
            feature.on_initialized()
            self.documenter_feature = feature
            self._logger.info(
                "Loaded plugin feature %s.%s",
                plugin.module,
                plugin.feature,
            )
