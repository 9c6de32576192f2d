"""Shared help-panel groups for the symscan CLI."""

from __future__ import annotations

from cyclopts import Group

session_group = Group(
    "Session",
    help="Configuration and logging options.",
    sort_key=0,
)

input_group = Group(
    "Input",
    help="Select the document, symbols, and decoding bindings.",
    sort_key=1,
)

output_group = Group(
    "Output",
    help="Configure report format and destination.",
    sort_key=2,
)

__all__ = ["input_group", "output_group", "session_group"]
