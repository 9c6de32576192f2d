"""Tests for scanning a document for matching symbol occurrences."""

from __future__ import annotations

import io

import msgspec
import pytest

from symscan.extract.scip_audit import (
    DEFAULT_DOCUMENT,
    DEFAULT_SYMBOL_SUFFIXES,
    ScanSpec,
    scan_index,
    write_jsonl,
    write_text,
)
from symscan.extract.scip_ranges import MalformedRangeError, MultiLineRange, PointRange

_SPEC = ScanSpec(document="src/app.ts", symbol_suffixes=("A", "C"))


def _scenario(scip_index_builder):
    return scip_index_builder(
        [
            ("src/other.ts", [("A", [9, 9])]),
            ("src/app.ts", [("A", [1, 0, 1, 5]), ("B", [4, 4]), ("C", [2, 3])]),
        ]
    )


def test_scan_reports_matches_in_occurrence_order(scip_index_builder) -> None:
    """Only matching occurrences of the target document are reported, in order."""
    stream = io.StringIO()
    count = write_text(scan_index(_scenario(scip_index_builder), _SPEC), stream)
    assert count == 2
    assert stream.getvalue() == "2:1,2:6 | A\n3:4 | C\n"


def test_scan_records_carry_zero_based_ranges(scip_index_builder) -> None:
    """Records keep the decoded range next to its display text."""
    matches = list(scan_index(_scenario(scip_index_builder), _SPEC))
    assert [m.path for m in matches] == ["src/app.ts", "src/app.ts"]
    assert matches[0].range == MultiLineRange(start_line=1, start_char=0, end_line=1, end_char=5)
    assert matches[1].range == PointRange(line=2, char=3)
    assert matches[1].to_line() == "3:4 | C"


def test_scan_without_target_document_is_empty(scip_index_builder) -> None:
    """A missing target document is an empty result, not an error."""
    index = scip_index_builder([("src/other.ts", [("A", [0, 0])])])
    assert list(scan_index(index, _SPEC)) == []


def test_malformed_range_aborts_scan(scip_index_builder) -> None:
    """A matching occurrence with an oversized range stops the scan."""
    index = scip_index_builder([("src/app.ts", [("A", [0, 0]), ("C", [1, 2, 3, 4, 5])])])
    matches = scan_index(index, _SPEC)
    assert next(matches).display == "1:1"
    with pytest.raises(MalformedRangeError):
        next(matches)


def test_non_matching_occurrences_are_not_formatted(scip_index_builder) -> None:
    """Ranges of skipped symbols are never classified."""
    index = scip_index_builder([("src/app.ts", [("B", [1, 2, 3, 4, 5]), ("C", [0])])])
    assert [m.display for m in scan_index(index, _SPEC)] == ["∅"]


def test_write_jsonl_emits_tagged_records(scip_index_builder) -> None:
    """JSON lines carry path, symbol, tagged range and display text."""
    stream = io.StringIO()
    write_jsonl(scan_index(_scenario(scip_index_builder), _SPEC), stream)
    records = [msgspec.json.decode(line) for line in stream.getvalue().splitlines()]
    assert records[1] == {
        "path": "src/app.ts",
        "symbol": "C",
        "range": {"kind": "point", "line": 2, "char": 3},
        "display": "3:4",
    }
    assert records[0]["range"]["kind"] == "multi_line"


def test_scan_spec_defaults() -> None:
    """Defaults target the flag-set type under both package names."""
    spec = ScanSpec()
    assert spec.document == DEFAULT_DOCUMENT
    assert spec.matcher().suffixes == DEFAULT_SYMBOL_SUFFIXES
    assert len(DEFAULT_SYMBOL_SUFFIXES) == 2
