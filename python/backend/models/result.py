"""Outcome of a layout search."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.grid import Grid


@dataclass
class SearchResult:
    grid: Grid
    score: int
    evaluations: int = 0
    history: list[int] = field(default_factory=list)
