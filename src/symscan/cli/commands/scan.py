"""Report occurrences of matching symbols in one document of a SCIP index."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Literal, TypeVar

from cyclopts import Parameter

from symscan.cli.config_loader import load_scan_config
from symscan.cli.config_models import ScanConfig
from symscan.cli.groups import input_group, output_group, session_group
from symscan.cli.result import CliResult
from symscan.extract.scip_audit import (
    DEFAULT_DOCUMENT,
    DEFAULT_SYMBOL_SUFFIXES,
    WRITERS,
    OccurrenceMatch,
    ScanSpec,
    scan_index,
)
from symscan.extract.scip_proto_loader import ScipProtoLoadError
from symscan.extract.scip_ranges import MalformedRangeError
from symscan.extract.scip_reader import ScipIndexError, ScipParseOptions, read_index

if TYPE_CHECKING:
    from collections.abc import Iterable

LOGGER = logging.getLogger(__name__)

_EXPECTED_ERRORS = (
    ScipIndexError,
    ScipProtoLoadError,
    MalformedRangeError,
    ValueError,
    OSError,
)


def scan_command(
    index_path: Annotated[
        str | None,
        Parameter(help="Path to an index.scip file."),
    ] = None,
    *,
    document: Annotated[
        str | None,
        Parameter(
            name="--document",
            help=f"Relative path of the document to scan [default: {DEFAULT_DOCUMENT}].",
            group=input_group,
        ),
    ] = None,
    symbol_suffix: Annotated[
        tuple[str, ...] | None,
        Parameter(
            name="--symbol-suffix",
            help="Symbol suffix to report; repeat for several suffixes.",
            group=input_group,
        ),
    ] = None,
    bindings_dir: Annotated[
        Path | None,
        Parameter(
            name="--bindings-dir",
            help="Directory holding protoc-generated scip_pb2.py to decode with.",
            group=input_group,
        ),
    ] = None,
    output_format: Annotated[
        Literal["text", "jsonl"] | None,
        Parameter(
            name="--format",
            help="Report format: 'text' lines or 'jsonl' records [default: text].",
            group=output_group,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        Parameter(
            name=["--output", "-o"],
            help="Write the report to a file instead of stdout.",
            group=output_group,
        ),
    ] = None,
    config_file: Annotated[
        str | None,
        Parameter(
            name="--config",
            help="Path to configuration file (overrides default search).",
            group=session_group,
        ),
    ] = None,
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"],
        Parameter(
            name="--log-level",
            help="Logging verbosity level.",
            env_var="SYMSCAN_LOG_LEVEL",
            group=session_group,
        ),
    ] = "WARNING",
) -> CliResult:
    """Print every occurrence of the configured symbols in the target document.

    Each match is reported as ``<range> | <symbol>`` with 1-indexed positions,
    in the order the occurrences appear in the index.

    Returns
    -------
    CliResult
        Success, or an error result naming the failure and its exit code.
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s: %(name)s: %(message)s")
    try:
        config = load_scan_config(config_file)
        spec = ScanSpec(
            document=_pick(document, config.document, DEFAULT_DOCUMENT),
            symbol_suffixes=_pick(symbol_suffix, config.symbol_suffixes, DEFAULT_SYMBOL_SUFFIXES),
        )
        # Reject an empty suffix set before reading the index.
        spec.matcher()
        parse_opts = _parse_options(bindings_dir, config)
        index = read_index(index_path, parse_opts)
        fmt = _pick(output_format, config.output_format, "text")
        count = _write_report(scan_index(index, spec), fmt, output)
    except _EXPECTED_ERRORS as exc:
        return CliResult.from_exception(exc)
    LOGGER.debug("Reported %d matching occurrences in %s", count, spec.document)
    return CliResult.success(metrics={"matches": float(count)})


T = TypeVar("T")


def _pick(cli_value: T | None, config_value: T | None, default: T) -> T:
    if cli_value is not None:
        return cli_value
    if config_value is not None:
        return config_value
    return default


def _parse_options(bindings_dir: Path | None, config: ScanConfig) -> ScipParseOptions:
    if bindings_dir is not None:
        return ScipParseOptions(build_dir=bindings_dir)
    if config.bindings_dir is not None:
        return ScipParseOptions(build_dir=Path(config.bindings_dir))
    return ScipParseOptions()


def _write_report(
    matches: Iterable[OccurrenceMatch],
    output_format: str,
    output: Path | None,
) -> int:
    writer = WRITERS[output_format]
    if output is None:
        return writer(matches, sys.stdout)
    with output.open("w", encoding="utf-8") as stream:
        return writer(matches, stream)


__all__ = ["scan_command"]
