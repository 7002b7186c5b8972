"""Constraint-based layout for terminal TUI screens.

A parent rectangle is partitioned along one axis into child rectangles,
one per constraint:

- Fixed(n):       exactly n cells
- Percentage(p):  p% of the usable extent (not of the remaining space)
- Minimum(n):     at least n cells, plus an equal share of any spare space

Partitioning is pure. Screens recompute their layout every frame from the
live terminal size, so nothing here is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


@dataclass(frozen=True)
class Rect:
    """Rectangle bounds for widget positioning (0-indexed cells)."""
    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def right(self) -> int:
        """First column past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row past the bottom edge."""
        return self.y + self.height

    def inner(self, margin: Union[int, "Margin"]) -> Rect:
        """Shrink by a margin on every side, never below zero size."""
        m = Margin.of(margin)
        width = max(0, self.width - 2 * m.horizontal)
        height = max(0, self.height - 2 * m.vertical)
        return Rect(
            x=self.x + min(m.horizontal, self.width // 2),
            y=self.y + min(m.vertical, self.height // 2),
            width=width,
            height=height,
        )

    def intersects(self, other: Rect) -> bool:
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


class Direction(Enum):
    """Axis along which a rectangle is split."""
    VERTICAL = "vertical"        # Stack top to bottom
    HORIZONTAL = "horizontal"    # Side by side, left to right


@dataclass(frozen=True)
class Margin:
    """Cells subtracted from the left/right and top/bottom edges."""
    horizontal: int = 0
    vertical: int = 0

    def __post_init__(self) -> None:
        if self.horizontal < 0 or self.vertical < 0:
            raise ValueError(f"Margin must not be negative, got {self}")

    @classmethod
    def of(cls, margin: Union[int, Margin]) -> Margin:
        if isinstance(margin, Margin):
            return margin
        return cls(horizontal=margin, vertical=margin)


@dataclass(frozen=True)
class Fixed:
    """Exactly ``length`` cells."""
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Fixed length must not be negative, got {self.length}")


@dataclass(frozen=True)
class Percentage:
    """``value`` percent of the usable extent."""
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError(f"Percentage must be 0-100, got {self.value}")


@dataclass(frozen=True)
class Minimum:
    """At least ``length`` cells; grows to absorb spare space."""
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Minimum length must not be negative, got {self.length}")


Constraint = Union[Fixed, Percentage, Minimum]


def _demand(constraint: Constraint, extent: int) -> int:
    if isinstance(constraint, Fixed):
        return constraint.length
    if isinstance(constraint, Percentage):
        return extent * constraint.value // 100
    if isinstance(constraint, Minimum):
        return constraint.length
    raise TypeError(f"Unknown constraint: {constraint!r}")


def _allocate(constraints: Sequence[Constraint], extent: int) -> list[int]:
    """Resolve constraint demands into sizes summing exactly to ``extent``."""
    sizes = [_demand(c, extent) for c in constraints]
    total = sum(sizes)

    if total > extent:
        # Overflow: fill greedily in order, trailing regions lose out
        remaining = extent
        for i, size in enumerate(sizes):
            sizes[i] = min(size, remaining)
            remaining -= sizes[i]
        return sizes

    spare = extent - total
    fillers = [i for i, c in enumerate(constraints) if isinstance(c, Minimum)]
    if fillers:
        share, extra = divmod(spare, len(fillers))
        for n, i in enumerate(fillers):
            sizes[i] += share + (1 if n < extra else 0)
    elif sizes:
        sizes[-1] += spare
    return sizes


def partition(
    area: Rect,
    direction: Direction,
    constraints: Sequence[Constraint],
    margin: Union[int, Margin] = 0,
) -> list[Rect]:
    """
    Split ``area`` into one rectangle per constraint.

    The margin is removed from all edges first. Resulting rectangles are
    contiguous, never overlap, never have negative size, and together cover
    the usable area exactly.

    Args:
        area: Parent rectangle
        direction: Axis to split along
        constraints: Size rules, in output order
        margin: Cells removed from each edge (int for all sides, or Margin)

    Returns:
        Rectangles in the same order as ``constraints``
    """
    usable = area.inner(margin)
    vertical = direction == Direction.VERTICAL
    extent = usable.height if vertical else usable.width

    regions: list[Rect] = []
    offset = usable.y if vertical else usable.x
    for size in _allocate(constraints, extent):
        if vertical:
            regions.append(Rect(usable.x, offset, usable.width, size))
        else:
            regions.append(Rect(offset, usable.y, size, usable.height))
        offset += size
    return regions


class Layout:
    """
    Fluent builder over :func:`partition`.

    Example:
        header, body, footer = (
            Layout(Direction.VERTICAL)
            .constraints([Fixed(11), Minimum(1), Fixed(3)])
            .margin(1)
            .split(area)
        )
    """

    def __init__(self, direction: Direction = Direction.VERTICAL) -> None:
        self._direction = direction
        self._constraints: list[Constraint] = []
        self._margin: Union[int, Margin] = 0

    def constraints(self, constraints: Sequence[Constraint]) -> Layout:
        self._constraints = list(constraints)
        return self

    def margin(self, margin: Union[int, Margin]) -> Layout:
        self._margin = margin
        return self

    def split(self, area: Rect) -> list[Rect]:
        return partition(area, self._direction, self._constraints, self._margin)
