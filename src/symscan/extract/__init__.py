"""SCIP index decoding and occurrence extraction."""

from symscan.extract.scip_audit import OccurrenceMatch, ScanSpec, scan_document, scan_index
from symscan.extract.scip_locate import locate_document
from symscan.extract.scip_ranges import MalformedRangeError, classify_range, format_range
from symscan.extract.scip_reader import (
    ScipIndexDecodeError,
    ScipIndexError,
    ScipIndexIOError,
    ScipMissingInputError,
    ScipParseOptions,
    read_index,
)
from symscan.extract.scip_symbols import SymbolMatcher

__all__ = [
    "MalformedRangeError",
    "OccurrenceMatch",
    "ScanSpec",
    "ScipIndexDecodeError",
    "ScipIndexError",
    "ScipIndexIOError",
    "ScipMissingInputError",
    "ScipParseOptions",
    "SymbolMatcher",
    "classify_range",
    "format_range",
    "locate_document",
    "read_index",
    "scan_document",
    "scan_index",
]
