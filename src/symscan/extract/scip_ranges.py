"""Classify and render SCIP occurrence ranges.

SCIP encodes an occurrence range as an untagged sequence of zero-based
integers whose length selects the shape:

* ``[line, char]``: a single point
* ``[line, start_char, end_char]``: a span on one line
* ``[start_line, start_char, end_line, end_char]``: a span across lines

Sequences shorter than two integers carry no position. Any sequence longer
than four integers is rejected with :class:`MalformedRangeError`.
"""

from __future__ import annotations

from collections.abc import Sequence

from symscan.serde_msgspec import StructBaseStrict

RANGE_LEN_POINT = 2
RANGE_LEN_SHORT = 3
RANGE_LEN_FULL = 4

EMPTY_RANGE_PLACEHOLDER = "∅"


class MalformedRangeError(ValueError):
    """Raised when a range has a length outside the SCIP encoding."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = tuple(values)
        msg = (
            f"Malformed SCIP range {list(self.values)!r}: "
            f"expected at most {RANGE_LEN_FULL} integers, got {len(self.values)}."
        )
        super().__init__(msg)


class EmptyRange(StructBaseStrict, frozen=True, tag="empty", tag_field="kind"):
    """Range with no usable position."""


class PointRange(StructBaseStrict, frozen=True, tag="point", tag_field="kind"):
    """Single zero-based position."""

    line: int
    char: int


class SameLineRange(StructBaseStrict, frozen=True, tag="same_line", tag_field="kind"):
    """Zero-based span contained in one line."""

    line: int
    start_char: int
    end_char: int


class MultiLineRange(StructBaseStrict, frozen=True, tag="multi_line", tag_field="kind"):
    """Zero-based span across lines."""

    start_line: int
    start_char: int
    end_line: int
    end_char: int


ScipRange = EmptyRange | PointRange | SameLineRange | MultiLineRange


def classify_range(values: Sequence[int]) -> ScipRange:
    """Classify a raw SCIP range by its length.

    Parameters
    ----------
    values:
        Raw ``Occurrence.range`` integers.

    Returns
    -------
    ScipRange
        Tagged range variant.

    Raises
    ------
    MalformedRangeError
        Raised when more than four integers are present.
    """
    size = len(values)
    if size < RANGE_LEN_POINT:
        return EmptyRange()
    if size == RANGE_LEN_POINT:
        line, char = values
        return PointRange(line=int(line), char=int(char))
    if size == RANGE_LEN_SHORT:
        line, start_char, end_char = values
        return SameLineRange(line=int(line), start_char=int(start_char), end_char=int(end_char))
    if size == RANGE_LEN_FULL:
        start_line, start_char, end_line, end_char = values
        return MultiLineRange(
            start_line=int(start_line),
            start_char=int(start_char),
            end_line=int(end_line),
            end_char=int(end_char),
        )
    raise MalformedRangeError(values)


def render_range(rng: ScipRange) -> str:
    """Render a classified range as 1-indexed ``line:char`` text.

    Returns
    -------
    str
        Display text for the range.
    """
    if isinstance(rng, PointRange):
        return f"{rng.line + 1}:{rng.char + 1}"
    if isinstance(rng, SameLineRange):
        return f"{rng.line + 1}:{rng.start_char + 1}-{rng.end_char + 1}"
    if isinstance(rng, MultiLineRange):
        return (
            f"{rng.start_line + 1}:{rng.start_char + 1},"
            f"{rng.end_line + 1}:{rng.end_char + 1}"
        )
    return EMPTY_RANGE_PLACEHOLDER


def format_range(values: Sequence[int]) -> str:
    """Classify and render a raw SCIP range.

    Returns
    -------
    str
        Display text for the range.
    """
    return render_range(classify_range(values))


__all__ = [
    "EMPTY_RANGE_PLACEHOLDER",
    "EmptyRange",
    "MalformedRangeError",
    "MultiLineRange",
    "PointRange",
    "SameLineRange",
    "ScipRange",
    "classify_range",
    "format_range",
    "render_range",
]
