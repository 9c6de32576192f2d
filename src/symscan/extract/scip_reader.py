"""Read index.scip files into decoded protobuf Index messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from google.protobuf.message import DecodeError

from symscan.extract.scip_proto_loader import import_scip_pb2, load_scip_pb2_from_build
from symscan.extract.scip_schema import scip_messages

if TYPE_CHECKING:
    from google.protobuf.message import Message

LOGGER = logging.getLogger(__name__)


class ScipIndexError(RuntimeError):
    """Base exception for index.scip read failures."""


class ScipMissingInputError(ScipIndexError):
    """Raised when no index path was supplied."""

    def __init__(self) -> None:
        super().__init__("No SCIP index path supplied; pass the path to an index.scip file.")


class ScipIndexIOError(ScipIndexError):
    """Raised when the index file cannot be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to read SCIP index {str(path)!r}: {reason}")


class ScipIndexDecodeError(ScipIndexError):
    """Raised when the file content is not a valid SCIP index."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{str(path)!r} is not a valid SCIP index: {reason}")


@dataclass(frozen=True)
class ScipParseOptions:
    """Configure index.scip parsing.

    By default the built-in Index/Document/Occurrence subset is used. Setting
    ``scip_pb2_import`` or ``build_dir`` decodes with protoc-generated bindings
    instead.
    """

    scip_pb2_import: str | None = None
    build_dir: Path | None = None
    log_counts: bool = True


def _index_message_class(options: ScipParseOptions) -> type[Message]:
    if options.scip_pb2_import:
        LOGGER.debug("Decoding with SCIP bindings module %s", options.scip_pb2_import)
        return import_scip_pb2(options.scip_pb2_import).Index
    if options.build_dir is not None:
        LOGGER.debug("Decoding with SCIP bindings from %s", options.build_dir)
        return load_scip_pb2_from_build(options.build_dir).Index
    return scip_messages().index


def read_index(
    index_path: str | Path | None,
    options: ScipParseOptions | None = None,
) -> Message:
    """Parse index.scip into a protobuf Index message.

    Parameters
    ----------
    index_path:
        Path to the index.scip file.
    options:
        Parsing options.

    Returns
    -------
    google.protobuf.message.Message
        Decoded Index message.

    Raises
    ------
    ScipMissingInputError
        Raised when no path is supplied.
    ScipIndexIOError
        Raised when the file cannot be read.
    ScipIndexDecodeError
        Raised when the bytes are not a well-formed SCIP index.
    """
    if index_path is None or str(index_path) == "":
        raise ScipMissingInputError
    opts = options or ScipParseOptions()
    path = Path(index_path)
    index_cls = _index_message_class(opts)

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ScipIndexIOError(path, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        raise ScipIndexIOError(path, str(exc)) from exc

    index = index_cls()
    try:
        index.ParseFromString(data)
    except DecodeError as exc:
        raise ScipIndexDecodeError(path, str(exc) or "malformed protobuf payload") from exc

    if opts.log_counts:
        counts = index_counts(index)
        LOGGER.info(
            "Decoded SCIP index %s: %d documents, %d occurrences",
            path,
            counts["documents"],
            counts["occurrences"],
        )
    return index


def index_counts(index: object) -> dict[str, int]:
    """Count documents and occurrences in a decoded index.

    Returns
    -------
    dict[str, int]
        Document and occurrence totals.
    """
    docs = list(getattr(index, "documents", []) or [])
    occurrences = sum(len(getattr(doc, "occurrences", [])) for doc in docs)
    return {"documents": len(docs), "occurrences": occurrences}


__all__ = [
    "ScipIndexDecodeError",
    "ScipIndexError",
    "ScipIndexIOError",
    "ScipMissingInputError",
    "ScipParseOptions",
    "index_counts",
    "read_index",
]
