"""CLI result contract for structured command returns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from symscan.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class CliResult:
    """Structured result from CLI command execution.

    Parameters
    ----------
    exit_code
        Integer exit code for the command.
    summary
        Optional human-readable summary, printed to stderr.
    metrics
        Mapping of metric names to numeric values.
    """

    exit_code: int
    summary: str | None = None
    metrics: Mapping[str, float] = field(default_factory=dict)

    @classmethod
    def success(
        cls,
        *,
        summary: str | None = None,
        metrics: Mapping[str, float] | None = None,
    ) -> CliResult:
        """Create a successful result.

        Returns
        -------
        CliResult
            Success result with exit code 0.
        """
        return cls(exit_code=ExitCode.SUCCESS, summary=summary, metrics=metrics or {})

    @classmethod
    def error(
        cls,
        exit_code: ExitCode | int,
        *,
        summary: str | None = None,
    ) -> CliResult:
        """Create an error result.

        Returns
        -------
        CliResult
            Error result with the specified exit code.
        """
        return cls(exit_code=int(exit_code), summary=summary)

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        *,
        summary: str | None = None,
    ) -> CliResult:
        """Create an error result from an exception.

        Parameters
        ----------
        exc
            Exception that caused the error.
        summary
            Optional custom summary (defaults to exception message).

        Returns
        -------
        CliResult
            Error result with exit code derived from exception type.
        """
        return cls.error(ExitCode.from_exception(exc), summary=summary or str(exc))

    @property
    def ok(self) -> bool:
        """Check if the result indicates success.

        Returns
        -------
        bool
            True if exit_code is 0.
        """
        return self.exit_code == ExitCode.SUCCESS


__all__ = ["CliResult"]
