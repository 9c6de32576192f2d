"""CLI entrypoints for symscan."""

from symscan.cli.app import main
from symscan.cli.exit_codes import ExitCode
from symscan.cli.result import CliResult

__all__ = ["CliResult", "ExitCode", "main"]
