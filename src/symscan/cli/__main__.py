"""Module entrypoint for the symscan CLI."""

from __future__ import annotations

import sys

from symscan.cli.app import main as run_cli


def main() -> None:
    """Run the symscan CLI."""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
