from __future__ import annotations
import copy
from dataclasses import dataclass
from abc import ABC, abstractmethod
from typing import Iterable
import typing


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    @classmethod
    def zero(cls) -> Point:
        return cls(0, 0)


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float

    @classmethod
    def square(cls, size: float = 0) -> Dimensions:
        """Dimensions with equal width and height."""
        return cls(size, size)


@dataclass(frozen=True)
class Bounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)


def min_point(points: Iterable[Point]) -> Point | None:
    """Component-wise minimum of the points, or None when there are none."""
    points = list(points)
    if not points:
        return None
    return Point(min(p.x for p in points), min(p.y for p in points))


def max_point(points: Iterable[Point]) -> Point | None:
    """Component-wise maximum of the points, or None when there are none."""
    points = list(points)
    if not points:
        return None
    return Point(max(p.x for p in points), max(p.y for p in points))


def bounds_of(points: Iterable[Point]) -> Bounds | None:
    points = list(points)
    lo, hi = min_point(points), max_point(points)
    if lo is None or hi is None:
        return None
    return Bounds(lo.x, lo.y, hi.x - lo.x, hi.y - lo.y)


if typing.TYPE_CHECKING:
    from .layout import Layout


class Shape(ABC):
    """Base class for every node of the drawing tree."""

    def __init__(self) -> None:
        self.parent: Shape | None = None

    @abstractmethod
    def serialize(self, layout: Layout) -> str:
        """Returns the SVG fragment for this shape, newline terminated."""
        pass

    @abstractmethod
    def offset(self, delta: Point) -> None:
        """Translates the shape's geometry in place."""
        pass

    def clone(self) -> typing.Self:
        """
        Returns a deep copy of the shape.
        The copy shares nothing with the original and belongs to no container.
        """
        memo = {id(self.parent): None} if self.parent is not None else {}
        duplicate = copy.deepcopy(self, memo)
        duplicate.parent = None
        return duplicate
