"""Command line for generating the HTML API reference."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from apidoc_html.errors import DocumenterError
from apidoc_html.html_documenter import HtmlDocumenter
from apidoc_html.load_api_model import find_model_files, load_api_model
from apidoc_html.load_config import NewlineKind, load_documenter_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        prog="apidoc-html",
        description=(
            "Generate API documentation as a collection of HTML files, "
            "suitable for publishing on a website."
        ),
    )
    ap.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Model files (*.api.yml, *.api.json) or folders containing them",
    )
    ap.add_argument(
        "-o",
        "--output-folder",
        type=Path,
        default=Path("html"),
        help="Folder to write pages into; its contents are deleted first "
        "(default: ./html)",
    )
    ap.add_argument(
        "--config",
        type=Path,
        help="YAML documenter configuration (plugins, newline kind, ...)",
    )
    ap.add_argument(
        "--newline",
        choices=[k.value for k in NewlineKind],
        help="Override the line ending convention of written pages",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every written file",
    )
    return ap


def collect_model_files(inputs: list[Path]) -> list[Path]:
    """Expand folders into the model files they contain."""
    files: list[Path] = []
    for p in inputs:
        if p.is_dir():
            files.extend(find_model_files(p))
        else:
            files.append(p)
    return files


def run_documenter(args: argparse.Namespace) -> int:
    """Load the model and configuration, then write the site."""
    yml_files = collect_model_files(args.inputs)
    if not yml_files:
        msg = f"No model files found under: {', '.join(map(str, args.inputs))}"
        raise SystemExit(msg)

    api_model = load_api_model(yml_files)

    documenter_config = None
    if args.config or args.newline:
        documenter_config = load_documenter_config(args.config)
        if args.newline:
            documenter_config = documenter_config.with_newline_kind(
                NewlineKind(args.newline),
            )

    documenter = HtmlDocumenter(api_model, documenter_config)
    documenter.generate_files(args.output_folder.resolve())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line and map fatal errors to exit status 1."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_documenter(args)
    except DocumenterError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
