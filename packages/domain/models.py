from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TableHandle:
    """Reference to one table element inside a parsed document.

    ``document`` is the DomIndex that produced ``node``; the handle is only
    valid while that index is alive. Equality is by document position, never
    by markup content.
    """

    node: Any = field(compare=False, repr=False)
    position: int
    document: Any = field(compare=False, repr=False, default=None)


@dataclass(frozen=True)
class ExtractedSeries:
    table: TableHandle
    column_index: int
    values: list[float] = field(default_factory=list)
    label: str | None = None

    @property
    def minimum(self) -> float:
        return min(self.values)

    @property
    def maximum(self) -> float:
        return max(self.values)
