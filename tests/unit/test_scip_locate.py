"""Tests for locating documents by relative path."""

from __future__ import annotations

from symscan.extract.scip_locate import locate_document


def test_returns_none_without_matching_document(scip_index_builder) -> None:
    """No document at the target path yields no result."""
    index = scip_index_builder([("src/other.ts", [("A", [0, 0])])])
    assert locate_document(index, "src/app.ts") is None


def test_returns_none_for_empty_index(scip_index_builder) -> None:
    """An index with no documents yields no result."""
    assert locate_document(scip_index_builder([]), "src/app.ts") is None


def test_returns_first_document_with_path(scip_index_builder) -> None:
    """The first document in sequence order wins over later duplicates."""
    index = scip_index_builder(
        [
            ("src/other.ts", [("zero", [0, 0])]),
            ("src/app.ts", [("first", [0, 0])]),
            ("src/app.ts", [("second", [0, 0])]),
        ]
    )
    doc = locate_document(index, "src/app.ts")
    assert doc is not None
    assert [occ.symbol for occ in doc.occurrences] == ["first"]


def test_path_comparison_is_exact(scip_index_builder) -> None:
    """Paths are compared without case folding or normalization."""
    index = scip_index_builder([("src/App.ts", []), ("./src/app.ts", [])])
    assert locate_document(index, "src/app.ts") is None
