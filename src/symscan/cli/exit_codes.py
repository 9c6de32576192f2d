"""Exit code taxonomy for the symscan CLI."""

from __future__ import annotations

from enum import IntEnum

from symscan.extract.scip_proto_loader import ScipProtoLoadError
from symscan.extract.scip_ranges import MalformedRangeError
from symscan.extract.scip_reader import (
    ScipIndexDecodeError,
    ScipIndexIOError,
    ScipMissingInputError,
)


class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Exit codes follow Unix conventions with domain-specific extensions:
    - 0: Success
    - 1-9: General errors (parse, validation, config)
    - 10-19: Index read and decode errors
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    VALIDATION_ERROR = 3
    CONFIG_ERROR = 4

    # Index errors (10-19)
    MISSING_INPUT = 10
    INDEX_READ_ERROR = 11
    INDEX_DECODE_ERROR = 12
    MALFORMED_RANGE = 13
    BINDINGS_ERROR = 14

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception to an appropriate exit code.

        Parameters
        ----------
        exc
            Exception to classify.

        Returns
        -------
        ExitCode
            Exit code appropriate for the exception type.
        """
        cyclopts_code = _exit_code_for_cyclopts(exc)
        if cyclopts_code is not None:
            return cyclopts_code

        index_code = _exit_code_for_index_error(exc)
        if index_code is not None:
            return index_code

        name_code = _exit_code_for_exception_name(exc)
        if name_code is not None:
            return name_code

        type_code = _exit_code_for_exception_type(exc)
        if type_code is not None:
            return type_code

        return cls.GENERAL_ERROR


def _exit_code_for_cyclopts(exc: BaseException) -> ExitCode | None:
    if not exc.__class__.__module__.startswith("cyclopts"):
        return None
    if exc.__class__.__name__ == "ValidationError":
        return ExitCode.VALIDATION_ERROR
    return ExitCode.PARSE_ERROR


def _exit_code_for_index_error(exc: BaseException) -> ExitCode | None:
    mappings: tuple[tuple[type[BaseException], ExitCode], ...] = (
        (ScipMissingInputError, ExitCode.MISSING_INPUT),
        (ScipIndexIOError, ExitCode.INDEX_READ_ERROR),
        (ScipIndexDecodeError, ExitCode.INDEX_DECODE_ERROR),
        (MalformedRangeError, ExitCode.MALFORMED_RANGE),
        (ScipProtoLoadError, ExitCode.BINDINGS_ERROR),
    )
    for exc_type, exit_code in mappings:
        if isinstance(exc, exc_type):
            return exit_code
    return None


def _exit_code_for_exception_name(exc: BaseException) -> ExitCode | None:
    if exc.__class__.__name__ in {"ConfigError", "TOMLDecodeError"}:
        return ExitCode.CONFIG_ERROR
    return None


def _exit_code_for_exception_type(exc: BaseException) -> ExitCode | None:
    if isinstance(exc, (ValueError, TypeError)):
        return ExitCode.VALIDATION_ERROR
    if isinstance(exc, OSError):
        return ExitCode.GENERAL_ERROR
    return None


__all__ = ["ExitCode"]
