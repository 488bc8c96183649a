"""Axis-aligned rectangle geometry and overlap tests.

All placement and gameplay collision checks go through `overlaps`.
Coordinates are raster-style: x grows right, y grows down, and (x, y) is the
top-left corner.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def offset(self, dx: float, dy: float = 0.0) -> "Rect":
        """Return a copy shifted by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def as_tuple(self):
        return (self.x, self.y, self.width, self.height)


def _rect_of(obj) -> Rect:
    # Entities expose a `.rect` property; plain Rects are accepted too.
    return obj if isinstance(obj, Rect) else obj.rect


def overlaps(a, b) -> bool:
    """True iff the two boxes intersect on both axes.

    Touching edges do not count as overlap.
    """
    ra, rb = _rect_of(a), _rect_of(b)
    return (
        ra.x < rb.right
        and ra.right > rb.x
        and ra.y < rb.bottom
        and ra.bottom > rb.y
    )


def any_overlap(rect, candidates: Iterable, exclude: Iterable = ()) -> bool:
    """True if `rect` overlaps any candidate not present in `exclude`.

    Exclusion compares by identity, so equal-valued entities are still
    distinguished.
    """
    excluded = {id(obj) for obj in exclude}
    return any(
        overlaps(rect, candidate)
        for candidate in candidates
        if id(candidate) not in excluded
    )
