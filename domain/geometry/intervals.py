"""Geometry Bounded Context - Integer Interval Value Objects.

Closed integer intervals used to describe the index extent of elevation
models. Both types are immutable and compare by value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class Interval1D(BaseModel):
    """Closed integer interval [included_from, included_to] (Value Object).

    Invariants:
        included_from <= included_to
    """

    included_from: int
    included_to: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_bounds(self) -> "Interval1D":
        if self.included_from > self.included_to:
            raise ValueError(
                f"Invalid interval: included_from={self.included_from} > "
                f"included_to={self.included_to}"
            )
        return self

    def contains(self, v: int) -> bool:
        return self.included_from <= v <= self.included_to

    def size(self) -> int:
        return self.included_to - self.included_from + 1

    def size_of_intersection_with(self, other: "Interval1D") -> int:
        if (
            other.included_from > self.included_to
            or other.included_to < self.included_from
        ):
            return 0
        return (
            min(self.included_to, other.included_to)
            - max(self.included_from, other.included_from)
            + 1
        )

    def bounding_union(self, other: "Interval1D") -> "Interval1D":
        """Smallest interval containing both intervals."""
        return Interval1D(
            included_from=min(self.included_from, other.included_from),
            included_to=max(self.included_to, other.included_to),
        )

    def is_unionable_with(self, other: "Interval1D") -> bool:
        """True if the two intervals overlap or touch (no gap between them)."""
        union_size = (
            self.size() + other.size() - self.size_of_intersection_with(other)
        )
        return union_size == self.bounding_union(other).size()

    def union(self, other: "Interval1D") -> "Interval1D":
        """Union of two unionable intervals.

        Raises:
            ValueError: If the intervals are separated by a gap
        """
        if not self.is_unionable_with(other):
            raise ValueError(f"Intervals {self} and {other} are not unionable")
        return self.bounding_union(other)

    def __str__(self) -> str:
        return f"[{self.included_from}..{self.included_to}]"


class Interval2D(BaseModel):
    """Cartesian product of two Interval1D (Value Object)."""

    x: Interval1D
    y: Interval1D

    model_config = ConfigDict(frozen=True)

    def contains(self, x: int, y: int) -> bool:
        return self.x.contains(x) and self.y.contains(y)

    def size(self) -> int:
        return self.x.size() * self.y.size()

    def size_of_intersection_with(self, other: "Interval2D") -> int:
        return self.x.size_of_intersection_with(
            other.x
        ) * self.y.size_of_intersection_with(other.y)

    def bounding_union(self, other: "Interval2D") -> "Interval2D":
        return Interval2D(
            x=self.x.bounding_union(other.x), y=self.y.bounding_union(other.y)
        )

    def is_unionable_with(self, other: "Interval2D") -> bool:
        """True if the union of both areas is exactly their bounding rectangle."""
        union_size = (
            self.size() + other.size() - self.size_of_intersection_with(other)
        )
        return union_size == self.bounding_union(other).size()

    def union(self, other: "Interval2D") -> "Interval2D":
        """Union of two unionable rectangles.

        Raises:
            ValueError: If the union is not itself a rectangle
        """
        if not self.is_unionable_with(other):
            raise ValueError(f"Intervals {self} and {other} are not unionable")
        return Interval2D(x=self.x.union(other.x), y=self.y.union(other.y))

    def __str__(self) -> str:
        return f"{self.x}x{self.y}"
