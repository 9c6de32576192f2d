"""Main application setup for the symscan CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cyclopts import App, Parameter
from cyclopts.exceptions import CycloptsError

from symscan.cli.commands.scan import scan_command
from symscan.cli.commands.version import get_version
from symscan.cli.exit_codes import ExitCode
from symscan.cli.result_action import cli_result_action

if TYPE_CHECKING:
    from collections.abc import Sequence

_HELP_EPILOGUE = """
Examples:
  symscan index.scip                                  Scan the default document
  symscan index.scip --document src/app/main.ts       Scan another document
  symscan index.scip --symbol-suffix 'pkg'/Type#      Report another symbol
  symscan index.scip --format jsonl -o reads.jsonl    Write JSON records to a file

Environment Variables:
  SYMSCAN_LOG_LEVEL   Default log level (DEBUG, INFO, WARNING, ERROR)

Configuration:
  symscan.toml or [tool.symscan] in pyproject.toml supply defaults for
  document, symbol_suffixes, output_format and bindings_dir.
"""

app = App(
    name="symscan",
    help="Report where symbols occur in one document of a SCIP index.",
    help_epilogue=_HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(
        show_default=True,
        show_env_var=True,
    ),
)
app.default(scan_command)


def main(tokens: Sequence[str] | None = None) -> int:
    """Parse CLI tokens, run the selected command, and return an exit code.

    Parameters
    ----------
    tokens
        Command-line tokens; defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit status code from command execution.
    """
    try:
        command, bound, _ignored = app.parse_args(
            tokens,
            exit_on_error=False,
            print_error=True,
        )
    except CycloptsError as exc:
        return ExitCode.from_exception(exc)
    return cli_result_action(command(*bound.args, **bound.kwargs))


__all__ = ["app", "main"]
