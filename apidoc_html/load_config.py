"""Loading of the documenter configuration file."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from apidoc_html.deep_merge import deep_merge
from apidoc_html.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "newline_kind": "crlf",
    "stylesheet": "styles.css",
    "header_logo_href": "https://developers.symphony.com/",
    "plugins": [],
}


class NewlineKind(str, Enum):
    """Line ending convention used when writing pages."""

    CRLF = "crlf"
    LF = "lf"
    OS = "os"

    @property
    def newline(self) -> str:
        """Return the characters written for each line break."""
        if self is NewlineKind.CRLF:
            return "\r\n"
        if self is NewlineKind.LF:
            return "\n"
        return os.linesep


@dataclass(frozen=True)
class PluginConfig:
    """A feature class to load, named by module and attribute."""

    module: str
    feature: str


@dataclass(frozen=True)
class DocumenterConfig:
    """Settings that shape the generated site."""

    newline_kind: NewlineKind = NewlineKind.CRLF
    stylesheet: str = "styles.css"
    header_logo_href: str = DEFAULT_CONFIG["header_logo_href"]
    plugins: tuple[PluginConfig, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumenterConfig:
        """Build a config from a merged mapping."""
        raw_kind = str(data.get("newline_kind", NewlineKind.CRLF.value)).lower()
        try:
            newline_kind = NewlineKind(raw_kind)
        except ValueError:
            msg = f"Unknown newline_kind: {raw_kind!r}"
            raise ConfigError(msg) from None

        stylesheet = str(data.get("stylesheet") or "styles.css")
        stylesheet_path = Path(stylesheet)
        if stylesheet_path.is_absolute() or ".." in stylesheet_path.parts:
            msg = f"stylesheet must be a path inside the output folder: {stylesheet!r}"
            raise ConfigError(msg)

        plugins: list[PluginConfig] = []
        for entry in data.get("plugins") or []:
            if not isinstance(entry, dict) or not entry.get("module"):
                msg = f"Plugin entries need a 'module' key: {entry!r}"
                raise ConfigError(msg)
            plugins.append(
                PluginConfig(
                    module=str(entry["module"]),
                    feature=str(entry.get("feature") or "Feature"),
                ),
            )
        return cls(
            newline_kind=newline_kind,
            stylesheet=stylesheet,
            header_logo_href=str(
                data.get("header_logo_href") or DEFAULT_CONFIG["header_logo_href"],
            ),
            plugins=tuple(plugins),
        )

    def with_newline_kind(self, newline_kind: NewlineKind) -> DocumenterConfig:
        """Return a copy using ``newline_kind``."""
        return replace(self, newline_kind=newline_kind)


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {p}"
            raise ConfigError(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Config file must contain a mapping: {p}"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    return config


def load_documenter_config(path: str | Path | None = None) -> DocumenterConfig:
    """Load and validate the configuration in one step."""
    return DocumenterConfig.from_dict(load_config(path))
