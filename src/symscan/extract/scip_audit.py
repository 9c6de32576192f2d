"""Report symbol occurrences for one document of a SCIP index."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from symscan.extract.scip_locate import locate_document
from symscan.extract.scip_ranges import ScipRange, classify_range, render_range
from symscan.extract.scip_symbols import SymbolMatcher
from symscan.serde_msgspec import StructBaseCompat, dumps_json_line

if TYPE_CHECKING:
    from typing import TextIO

LOGGER = logging.getLogger(__name__)

OutputFormat = Literal["text", "jsonl"]

DEFAULT_DOCUMENT = (
    "src/app/components/lender-qview-task-list-page/lender-qview-task-list-page/"
    "lender-qview-task-list-page.component.ts"
)
DEFAULT_SYMBOL_SUFFIXES: tuple[str, ...] = (
    "'launchdarkly-js-client-sdk'`/LDFlagSet#",
    "'launchdarkly-js-sdk-common'`/LDFlagSet#",
)


@dataclass(frozen=True)
class ScanSpec:
    """Target document and symbol suffixes for one scan."""

    document: str = DEFAULT_DOCUMENT
    symbol_suffixes: Sequence[str] = field(default=DEFAULT_SYMBOL_SUFFIXES)

    def matcher(self) -> SymbolMatcher:
        """Return a matcher for the configured suffixes.

        Returns
        -------
        SymbolMatcher
            Matcher over ``symbol_suffixes``.
        """
        return SymbolMatcher(self.symbol_suffixes)


class OccurrenceMatch(StructBaseCompat, frozen=True):
    """Occurrence of a matched symbol in the scanned document."""

    path: str
    symbol: str
    range: ScipRange
    display: str

    def to_line(self) -> str:
        """Render the ``<range> | <symbol>`` report line.

        Returns
        -------
        str
            Report line without a trailing newline.
        """
        return f"{self.display} | {self.symbol}"


def scan_document(document: object, matcher: SymbolMatcher) -> Iterator[OccurrenceMatch]:
    """Yield matches from a document in occurrence order.

    Yields
    ------
    OccurrenceMatch
        One record per occurrence whose symbol the matcher accepts.

    Raises
    ------
    MalformedRangeError
        Raised when a matched occurrence carries a range longer than four
        integers.
    """
    path = str(getattr(document, "relative_path", ""))
    for occurrence in getattr(document, "occurrences", []):
        symbol = occurrence.symbol
        if not matcher.matches(symbol):
            continue
        rng = classify_range(list(occurrence.range))
        yield OccurrenceMatch(path=path, symbol=symbol, range=rng, display=render_range(rng))


def scan_index(index: object, spec: ScanSpec) -> Iterator[OccurrenceMatch]:
    """Yield matches for the configured document of a decoded index.

    Yields
    ------
    OccurrenceMatch
        Matches from the first document at ``spec.document``; nothing when the
        index has no such document.
    """
    matcher = spec.matcher()
    document = locate_document(index, spec.document)
    if document is None:
        LOGGER.info("No document in the index has relative_path %r", spec.document)
        return
    yield from scan_document(document, matcher)


def write_text(matches: Iterable[OccurrenceMatch], stream: TextIO) -> int:
    """Write one ``<range> | <symbol>`` line per match.

    Returns
    -------
    int
        Number of lines written.
    """
    count = 0
    for match in matches:
        stream.write(match.to_line() + "\n")
        count += 1
    return count


def write_jsonl(matches: Iterable[OccurrenceMatch], stream: TextIO) -> int:
    """Write one JSON object per match.

    Returns
    -------
    int
        Number of records written.
    """
    count = 0
    for match in matches:
        stream.write(dumps_json_line(match))
        count += 1
    return count


WRITERS = {"text": write_text, "jsonl": write_jsonl}


__all__ = [
    "DEFAULT_DOCUMENT",
    "DEFAULT_SYMBOL_SUFFIXES",
    "WRITERS",
    "OccurrenceMatch",
    "OutputFormat",
    "ScanSpec",
    "scan_document",
    "scan_index",
    "write_jsonl",
    "write_text",
]
