"""Tests for reading and decoding index.scip files."""

from __future__ import annotations

from pathlib import Path

import pytest

from symscan.extract.scip_proto_loader import ScipProtoLoadError
from symscan.extract.scip_reader import (
    ScipIndexDecodeError,
    ScipIndexIOError,
    ScipMissingInputError,
    ScipParseOptions,
    index_counts,
    read_index,
)

_DOCS = [
    ("src/app.ts", [("A", [1, 0, 1, 5]), ("B", [2, 3])]),
    ("src/other.ts", [("C", [4, 1, 9])]),
]


def test_read_index_decodes_documents(write_scip_index) -> None:
    """Paths, symbols and ranges survive a write/read cycle."""
    index = read_index(write_scip_index(_DOCS))
    assert [doc.relative_path for doc in index.documents] == ["src/app.ts", "src/other.ts"]
    first = index.documents[0]
    assert [(occ.symbol, list(occ.range)) for occ in first.occurrences] == [
        ("A", [1, 0, 1, 5]),
        ("B", [2, 3]),
    ]
    assert index_counts(index) == {"documents": 2, "occurrences": 3}


def test_read_index_is_deterministic(write_scip_index) -> None:
    """Decoding the same bytes twice yields equal indexes."""
    path = write_scip_index(_DOCS)
    assert read_index(path) == read_index(str(path))


def test_unknown_fields_are_ignored(tmp_path: Path, scip_index_builder) -> None:
    """Fields outside the subset schema do not break decoding."""
    payload = scip_index_builder(_DOCS).SerializeToString()
    # Index.metadata (field 1) and Index.external_symbols (field 3).
    path = tmp_path / "extended.scip"
    path.write_bytes(b"\x0a\x02\x08\x01" + payload + b"\x1a\x00")
    index = read_index(path)
    assert [doc.relative_path for doc in index.documents] == ["src/app.ts", "src/other.ts"]


@pytest.mark.parametrize("value", [None, ""])
def test_missing_path_raises(value: str | None) -> None:
    """An absent path is reported as missing input."""
    with pytest.raises(ScipMissingInputError):
        read_index(value)


def test_unreadable_path_raises_with_path(tmp_path: Path) -> None:
    """Read failures name the attempted path."""
    missing = tmp_path / "missing.scip"
    with pytest.raises(ScipIndexIOError) as exc_info:
        read_index(missing)
    assert exc_info.value.path == missing
    assert str(missing) in str(exc_info.value)


def test_directory_path_raises(tmp_path: Path) -> None:
    """A directory cannot be read as an index."""
    with pytest.raises(ScipIndexIOError):
        read_index(tmp_path)


def test_malformed_bytes_raise_decode_error(tmp_path: Path) -> None:
    """Truncated protobuf content is not a valid index."""
    path = tmp_path / "broken.scip"
    # Index.documents with a declared length of 5 but only 2 bytes present.
    path.write_bytes(b"\x12\x05ab")
    with pytest.raises(ScipIndexDecodeError) as exc_info:
        read_index(path)
    assert str(path) in str(exc_info.value)
    assert "not a valid SCIP index" in str(exc_info.value)


def test_generated_bindings_from_build_dir(tmp_path: Path, write_scip_index) -> None:
    """A scip_pb2.py in build_dir is used for decoding."""
    build_dir = tmp_path / "bindings"
    build_dir.mkdir()
    (build_dir / "scip_pb2.py").write_text(
        "from symscan.extract.scip_schema import scip_messages\n"
        "Index = scip_messages().index\n",
        encoding="utf-8",
    )
    index = read_index(write_scip_index(_DOCS), ScipParseOptions(build_dir=build_dir))
    assert len(index.documents) == 2


def test_missing_generated_bindings_raise(tmp_path: Path, write_scip_index) -> None:
    """A build_dir without scip_pb2.py is a bindings error."""
    path = write_scip_index(_DOCS)
    with pytest.raises(ScipProtoLoadError, match=r"scip_pb2\.py not found"):
        read_index(path, ScipParseOptions(build_dir=tmp_path / "nowhere"))


def test_unimportable_bindings_module_raises(write_scip_index) -> None:
    """A bindings module name that cannot be imported is a bindings error."""
    path = write_scip_index(_DOCS)
    with pytest.raises(ScipProtoLoadError, match="Unable to import"):
        read_index(path, ScipParseOptions(scip_pb2_import="symscan_no_such_bindings"))


def test_failing_generated_bindings_raise(tmp_path: Path, write_scip_index) -> None:
    """A scip_pb2.py that fails while importing is a bindings error."""
    build_dir = tmp_path / "bindings"
    build_dir.mkdir()
    (build_dir / "scip_pb2.py").write_text(
        "raise ImportError('gencode/runtime version mismatch')\n", encoding="utf-8"
    )
    path = write_scip_index(_DOCS)
    with pytest.raises(ScipProtoLoadError, match="version mismatch") as exc_info:
        read_index(path, ScipParseOptions(build_dir=build_dir))
    assert "scip_pb2.py" in str(exc_info.value)


def test_path_with_nul_byte_raises_read_error(tmp_path: Path) -> None:
    """An index path the OS cannot represent is a read failure naming the path."""
    bad_path = f"{tmp_path}/index\x00.scip"
    with pytest.raises(ScipIndexIOError) as exc_info:
        read_index(bad_path)
    assert "index" in str(exc_info.value)
    assert exc_info.value.path == Path(bad_path)
