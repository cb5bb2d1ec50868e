from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .core import Point
from .layout import Layout
from .markup import fmt


# Per-coordinate mapping from user space to SVG space.


def map_x(x: float, layout: Layout) -> float:
    if layout.flips_x:
        return layout.dimensions.width - (x + layout.origin_offset.x) * layout.scale
    return (layout.origin_offset.x + x) * layout.scale


def map_y(y: float, layout: Layout) -> float:
    if layout.flips_y:
        return layout.dimensions.height - (y + layout.origin_offset.y) * layout.scale
    return (layout.origin_offset.y + y) * layout.scale


def map_length(d: float, layout: Layout) -> float:
    """Lengths are scaled, never flipped or offset."""
    return d * layout.scale


def map_point(p: Point, layout: Layout) -> Point:
    return Point(map_x(p.x, layout), map_y(p.y, layout))


# What shapes actually write: mapped values in "coordinates" mode, raw user
# values in "wrapper" mode where the enclosing group does the mapping.


def place_x(x: float, layout: Layout) -> float:
    return map_x(x, layout) if layout.maps_coordinates else x


def place_y(y: float, layout: Layout) -> float:
    return map_y(y, layout) if layout.maps_coordinates else y


def place_length(d: float, layout: Layout) -> float:
    return map_length(d, layout) if layout.maps_coordinates else d


def place_point(p: Point, layout: Layout) -> Point:
    return Point(place_x(p.x, layout), place_y(p.y, layout))


@dataclass(frozen=True)
class Transform:
    """
    The single group transform that replaces per-coordinate mapping.

    A point p is rendered at (ux + sx * (p.x + tx), uy + sy * (p.y + ty)),
    which is what SVG computes for
    transform="translate(ux uy) scale(sx sy) translate(tx ty)". The leading
    translation is only written when it is not zero.
    """

    sx: float = 1.0
    sy: float = 1.0
    tx: float = 0.0
    ty: float = 0.0
    ux: float = 0.0
    uy: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def for_layout(cls, layout: Layout) -> Transform:
        s = layout.scale
        w, h = layout.dimensions.width, layout.dimensions.height
        ox, oy = layout.origin_offset.x, layout.origin_offset.y

        sx = -s if layout.flips_x else s
        sy = -s if layout.flips_y else s

        if s == 0:
            # Everything collapses onto the origin corner
            ux = w if layout.flips_x else 0
            uy = h if layout.flips_y else 0
            return cls(sx=sx, sy=sy, tx=ox, ty=oy, ux=ux, uy=uy)

        tx = ox - w / s if layout.flips_x else ox
        ty = oy - h / s if layout.flips_y else oy

        return cls(sx=sx, sy=sy, tx=tx, ty=ty)

    @property
    def is_identity(self) -> bool:
        return self == Transform.identity()

    def map(self, p: Point) -> Point:
        return Point(
            self.ux + self.sx * (p.x + self.tx),
            self.uy + self.sy * (p.y + self.ty),
        )

    def __str__(self) -> str:
        inner = (
            f"scale({fmt(self.sx)} {fmt(self.sy)}) "
            f"translate({fmt(self.tx)} {fmt(self.ty)})"
        )

        if self.ux == 0 and self.uy == 0:
            return inner

        return f"translate({fmt(self.ux)} {fmt(self.uy)}) {inner}"


def counter_flip(anchor: Point, layout: Layout) -> str:
    """
    Local transform that mirrors text back around its anchor so glyphs stay
    upright inside a flipping wrapper. Empty when nothing flips.
    """
    if not (layout.flips_x or layout.flips_y):
        return ""

    fx = -1 if layout.flips_x else 1
    fy = -1 if layout.flips_y else 1

    return (
        f"translate({fmt(anchor.x)} {fmt(anchor.y)}) "
        f"scale({fx} {fy}) "
        f"translate({fmt(-anchor.x)} {fmt(-anchor.y)})"
    )


# Group operations attached to containers. They are expressed in user space.


class GroupOp(ABC):
    @abstractmethod
    def render(self, layout: Layout) -> str:
        """Returns the SVG transform list item(s) for this operation."""
        pass


def _pivot(layout: Layout, op: str) -> str:
    # Conjugates a user-space operation about the origin into SVG space.
    c = map_point(Point.zero(), layout)
    return f"translate({fmt(c.x)} {fmt(c.y)}) {op} translate({fmt(-c.x)} {fmt(-c.y)})"


@dataclass(frozen=True)
class Translation(GroupOp):
    dx: float
    dy: float

    def render(self, layout: Layout) -> str:
        if not layout.maps_coordinates:
            return f"translate({fmt(self.dx)} {fmt(self.dy)})"

        dx = map_length(self.dx, layout) * (-1 if layout.flips_x else 1)
        dy = map_length(self.dy, layout) * (-1 if layout.flips_y else 1)
        return f"translate({fmt(dx)} {fmt(dy)})"


@dataclass(frozen=True)
class Scaling(GroupOp):
    factor: float

    def render(self, layout: Layout) -> str:
        op = f"scale({fmt(self.factor)})"

        if not layout.maps_coordinates:
            return op

        return _pivot(layout, op)


@dataclass(frozen=True)
class Rotation(GroupOp):
    degrees: float

    def render(self, layout: Layout) -> str:
        if not layout.maps_coordinates:
            return f"rotate({fmt(self.degrees)})"

        # A single mirrored axis reverses the sense of rotation.
        angle = -self.degrees if layout.flips_x != layout.flips_y else self.degrees
        return _pivot(layout, f"rotate({fmt(angle)})")
