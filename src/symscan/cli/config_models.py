"""Typed configuration models for symscan."""

from __future__ import annotations

from typing import Literal

from symscan.serde_msgspec import StructBaseStrict


class ScanConfig(StructBaseStrict, frozen=True):
    """Scan defaults read from ``symscan.toml`` or ``[tool.symscan]``."""

    document: str | None = None
    symbol_suffixes: tuple[str, ...] | None = None
    output_format: Literal["text", "jsonl"] | None = None
    bindings_dir: str | None = None


__all__ = ["ScanConfig"]
