"""Main entry point for generating the HTML API reference from a model folder."""

import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from apidoc_html.run_documenter import main as run_documenter_main


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> int:
    """Run the documenter, optionally after the development checks.

    ``--dev`` runs ``dev.py --ci`` first; every other argument is passed to
    the documenter command line (see ``apidoc-html --help``).
    """
    argv = sys.argv[1:]
    if "--dev" in argv:
        argv.remove("--dev")
        print("--- Running Development Checks ---")
        run_command([sys.executable, "dev.py", "--ci"], cwd=Path(__file__).parent)
        print("\nDevelopment checks passed. Generating documentation.\n")
    return run_documenter_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
