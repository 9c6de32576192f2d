"""Shared fixtures for building SCIP index files."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from google.protobuf.message import Message

from symscan.extract.scip_schema import scip_messages

OccurrenceRow = tuple[str, Sequence[int]]
DocumentRow = tuple[str, Sequence[OccurrenceRow]]


def _build_index(documents: Sequence[DocumentRow]) -> Message:
    messages = scip_messages()
    index = messages.index()
    for relative_path, occurrences in documents:
        doc = index.documents.add()
        doc.relative_path = relative_path
        for symbol, rng in occurrences:
            occ = doc.occurrences.add()
            occ.symbol = symbol
            occ.range.extend(rng)
    return index


@pytest.fixture
def scip_index_builder() -> Callable[[Sequence[DocumentRow]], Message]:
    """Return a builder for in-memory SCIP Index messages.

    Returns
    -------
    Callable[[Sequence[DocumentRow]], Message]
        Builder taking ``(relative_path, [(symbol, range), ...])`` rows.
    """
    return _build_index


@pytest.fixture
def write_scip_index(tmp_path: Path) -> Callable[[Sequence[DocumentRow]], Path]:
    """Return a writer that serializes document rows to an index.scip file.

    Returns
    -------
    Callable[[Sequence[DocumentRow]], Path]
        Writer returning the path of the serialized index.
    """
    counter = iter(range(1_000_000))

    def _write(documents: Sequence[DocumentRow]) -> Path:
        path = tmp_path / f"index-{next(counter)}.scip"
        path.write_bytes(_build_index(documents).SerializeToString())
        return path

    return _write
