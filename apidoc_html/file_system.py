"""File-system helpers used while writing the generated site."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from apidoc_html.load_config import NewlineKind

logger = logging.getLogger(__name__)


def ensure_empty_folder(folder: Path) -> None:
    """Create ``folder`` or delete everything already inside it."""
    folder.mkdir(parents=True, exist_ok=True)
    for child in folder.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def copy_file(
    source: Path,
    destination: Path,
    log: logging.Logger | None = None,
) -> None:
    """Copy ``source`` to ``destination``, creating parent folders."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    (log or logger).debug("Copied %s -> %s", source, destination)


def write_file(
    path: Path,
    content: str,
    newline_kind: NewlineKind = NewlineKind.CRLF,
) -> None:
    """Write ``content`` as UTF-8, converting line endings to ``newline_kind``."""
    normalized = content.replace("\r\n", "\n").replace("\r", "\n")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(normalized, encoding="utf-8", newline=newline_kind.newline)
