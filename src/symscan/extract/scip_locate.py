"""Find a document in a decoded SCIP index by relative path."""

from __future__ import annotations


def locate_document(index: object, target_path: str) -> object | None:
    """Return the first document whose ``relative_path`` equals ``target_path``.

    The comparison is exact and case-sensitive. SCIP does not require paths
    to be unique, so later documents with the same path are ignored.

    Returns
    -------
    object | None
        Matching document message, or ``None`` when no document matches.
    """
    for doc in getattr(index, "documents", []):
        if doc.relative_path == target_path:
            return doc
    return None


__all__ = ["locate_document"]
