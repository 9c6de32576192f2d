"""Convert command return values into process exit codes."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console

from symscan.cli.exit_codes import ExitCode
from symscan.cli.result import CliResult

LOGGER = logging.getLogger(__name__)


def cli_result_action(result: Any, *, console: Console | None = None) -> int:
    """Report a command result and return the process exit code.

    Error summaries go to stderr so stdout carries only report lines.

    Parameters
    ----------
    result
        The return value from the command function.
    console
        Console for diagnostics; defaults to a stderr console.

    Returns
    -------
    int
        Exit code for the process.
    """
    err_console = console or Console(stderr=True, highlight=False)

    if result is None:
        return ExitCode.SUCCESS

    if isinstance(result, CliResult):
        if result.summary:
            prefix = "" if result.ok else "error: "
            err_console.print(f"{prefix}{result.summary}", markup=False, soft_wrap=True)
        for name, value in sorted(result.metrics.items()):
            LOGGER.debug("Metric %s=%s", name, value)
        return int(result.exit_code)

    if isinstance(result, int):
        return result

    err_console.print(
        f"Unexpected command return type: {type(result).__name__} (value: {result!r})",
        markup=False,
        soft_wrap=True,
    )
    return ExitCode.GENERAL_ERROR


__all__ = ["cli_result_action"]
