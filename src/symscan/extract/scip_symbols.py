"""Suffix matching for SCIP symbol strings."""

from __future__ import annotations

from collections.abc import Iterable


class SymbolMatcher:
    """Accept symbols ending with any of a fixed set of suffixes.

    SCIP symbols concatenate scheme, package and descriptor segments, so one
    type published under several package names needs one suffix per package.
    Matching is an exact string suffix test with no normalization.
    """

    __slots__ = ("_suffixes",)

    def __init__(self, suffixes: Iterable[str]) -> None:
        normalized = tuple(dict.fromkeys(suffixes))
        if not normalized:
            msg = "SymbolMatcher requires at least one symbol suffix."
            raise ValueError(msg)
        if any(not suffix for suffix in normalized):
            msg = "Symbol suffixes must be non-empty strings."
            raise ValueError(msg)
        self._suffixes = normalized

    @property
    def suffixes(self) -> tuple[str, ...]:
        return self._suffixes

    def matches(self, symbol: str) -> bool:
        return symbol.endswith(self._suffixes)

    def __repr__(self) -> str:
        return f"SymbolMatcher(suffixes={self._suffixes!r})"


__all__ = ["SymbolMatcher"]
