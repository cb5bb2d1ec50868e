from __future__ import annotations
from typing import Iterator, Self

from .core import Bounds, Point, Shape, bounds_of
from .errors import OwnershipError
from .layout import Layout
from .markup import attribute, attributes, coords, element, indent, text_element
from .style import Fill, Font, Stroke
from .transform import (
    GroupOp,
    counter_flip,
    map_x,
    map_y,
    place_length,
    place_point,
)


class Visual(Shape):
    """A shape with a fill and a stroke."""

    def __init__(self, fill: Fill | None = None, stroke: Stroke | None = None) -> None:
        super().__init__()
        self.fill = fill if fill is not None else Fill()
        self.stroke = stroke if stroke is not None else Stroke()

    def style(self, layout: Layout) -> str:
        return attributes(self.fill.serialize(layout), self.stroke.serialize(layout))


class Circle(Visual):
    def __init__(
        self,
        center: Point,
        diameter: float,
        fill: Fill | None = None,
        stroke: Stroke | None = None,
    ) -> None:
        super().__init__(fill=fill, stroke=stroke)
        self.center = center
        self.radius = diameter / 2

    def serialize(self, layout: Layout) -> str:
        c = place_point(self.center, layout)
        return element(
            "circle",
            attribute("cx", c.x),
            attribute("cy", c.y),
            attribute("r", place_length(self.radius, layout)),
            self.style(layout),
        )

    def offset(self, delta: Point) -> None:
        self.center += delta


class Ellipse(Visual):
    def __init__(
        self,
        center: Point,
        width: float,
        height: float,
        fill: Fill | None = None,
        stroke: Stroke | None = None,
    ) -> None:
        super().__init__(fill=fill, stroke=stroke)
        self.center = center
        self.rx, self.ry = width / 2, height / 2

    def serialize(self, layout: Layout) -> str:
        c = place_point(self.center, layout)
        return element(
            "ellipse",
            attribute("cx", c.x),
            attribute("cy", c.y),
            attribute("rx", place_length(self.rx, layout)),
            attribute("ry", place_length(self.ry, layout)),
            self.style(layout),
        )

    def offset(self, delta: Point) -> None:
        self.center += delta


class Rectangle(Visual):
    """
    An axis-aligned rectangle. `edge` is its minimum corner in user space, so
    the rectangle covers [edge.x, edge.x + width] x [edge.y, edge.y + height]
    whatever the layout's origin.
    """

    def __init__(
        self,
        edge: Point,
        width: float,
        height: float,
        fill: Fill | None = None,
        stroke: Stroke | None = None,
    ) -> None:
        super().__init__(fill=fill, stroke=stroke)
        self.edge = edge
        self.width, self.height = width, height

    def serialize(self, layout: Layout) -> str:
        if layout.maps_coordinates:
            # Flipped axes turn the far corner into the top-left one
            xs = map_x(self.edge.x, layout), map_x(self.edge.x + self.width, layout)
            ys = map_y(self.edge.y, layout), map_y(self.edge.y + self.height, layout)
            x, y = min(xs), min(ys)
        else:
            x, y = self.edge.x, self.edge.y

        return element(
            "rect",
            attribute("x", x),
            attribute("y", y),
            attribute("width", place_length(self.width, layout)),
            attribute("height", place_length(self.height, layout)),
            self.style(layout),
        )

    def offset(self, delta: Point) -> None:
        self.edge += delta


class Line(Shape):
    def __init__(self, start: Point, end: Point, stroke: Stroke | None = None) -> None:
        super().__init__()
        self.start, self.end = start, end
        self.stroke = stroke if stroke is not None else Stroke()

    def serialize(self, layout: Layout) -> str:
        a = place_point(self.start, layout)
        b = place_point(self.end, layout)
        return element(
            "line",
            attribute("x1", a.x),
            attribute("y1", a.y),
            attribute("x2", b.x),
            attribute("y2", b.y),
            self.stroke.serialize(layout),
        )

    def offset(self, delta: Point) -> None:
        self.start += delta
        self.end += delta


class PointShape(Visual):
    """Base for shapes made of a list of vertices."""

    tag = ""

    def __init__(
        self,
        points: list[Point] | None = None,
        fill: Fill | None = None,
        stroke: Stroke | None = None,
    ) -> None:
        super().__init__(fill=fill, stroke=stroke)
        self.points: list[Point] = list(points) if points else []

    def append(self, p: Point) -> Self:
        self.points.append(p)
        return self

    def extend(self, points: list[Point]) -> Self:
        self.points.extend(points)
        return self

    def bounds(self) -> Bounds | None:
        return bounds_of(self.points)

    def serialize(self, layout: Layout) -> str:
        pts = " ".join(
            coords(p.x, p.y) for p in (place_point(q, layout) for q in self.points)
        )
        return element(self.tag, attribute("points", pts), self.style(layout))

    def offset(self, delta: Point) -> None:
        self.points = [p + delta for p in self.points]


class Polygon(PointShape):
    tag = "polygon"


class Polyline(PointShape):
    tag = "polyline"


class Path(Visual):
    """
    A set of closed subpaths, filled with the even-odd rule.

    Points go into the current subpath; new_subpath() starts another one
    unless the current one is still empty.
    """

    def __init__(self, fill: Fill | None = None, stroke: Stroke | None = None) -> None:
        super().__init__(fill=fill, stroke=stroke)
        self.subpaths: list[list[Point]] = []
        self.new_subpath()

    def new_subpath(self) -> Self:
        if not self.subpaths or self.subpaths[-1]:
            self.subpaths.append([])
        return self

    def append(self, p: Point) -> Self:
        self.subpaths[-1].append(p)
        return self

    def extend(self, points: list[Point]) -> Self:
        self.subpaths[-1].extend(points)
        return self

    def bounds(self) -> Bounds | None:
        return bounds_of(p for sub in self.subpaths for p in sub)

    def serialize(self, layout: Layout) -> str:
        segments = []

        for sub in self.subpaths:
            if not sub:
                continue

            pts = " ".join(
                coords(p.x, p.y) for p in (place_point(q, layout) for q in sub)
            )
            segments.append(f"M{pts} z")

        return element(
            "path",
            attribute("d", " ".join(segments)),
            attribute("fill-rule", "evenodd"),
            self.style(layout),
        )

    def offset(self, delta: Point) -> None:
        self.subpaths = [[p + delta for p in sub] for sub in self.subpaths]


class Text(Visual):
    """
    A text label anchored at `origin`.

    Under a flipping wrapper the label carries its own counter transform so
    that it reads normally while its anchor follows the layout.
    """

    def __init__(
        self,
        origin: Point,
        content: str,
        fill: Fill | None = None,
        font: Font | None = None,
        stroke: Stroke | None = None,
    ) -> None:
        super().__init__(fill=fill, stroke=stroke)
        self.origin = origin
        self.content = content
        self.font = font if font is not None else Font()

    def serialize(self, layout: Layout) -> str:
        o = place_point(self.origin, layout)
        flip = "" if layout.maps_coordinates else counter_flip(self.origin, layout)

        return text_element(
            "text",
            self.content,
            attribute("x", o.x),
            attribute("y", o.y),
            self.style(layout),
            attribute("transform", flip) if flip else "",
            self.font.serialize(layout),
        )

    def offset(self, delta: Point) -> None:
        self.origin += delta


class Container(Visual):
    """
    An SVG group that owns an ordered list of shapes.

    Fill and stroke are inherited by children that do not set their own.
    Containers have no geometry of their own, so offset() does nothing.
    """

    def __init__(
        self,
        shapes: list[Shape] | None = None,
        fill: Fill | None = None,
        stroke: Stroke | None = None,
    ) -> None:
        super().__init__(stroke=stroke)
        # Unlike other visuals, a container only writes a fill when given one
        self.fill: Fill | None = fill
        self.shapes: list[Shape] = []
        self.operations: list[GroupOp] = []
        self.wrapper: str | None = None

        if shapes:
            self.append(*shapes)

    def append(self, *shapes: Shape) -> Self:
        """Takes ownership of the shapes and returns self for chaining."""
        for shape in shapes:
            if shape is self or shape in self.ancestors():
                raise OwnershipError("A container cannot contain itself")

            if shape.parent is not None:
                raise OwnershipError(
                    f"{type(shape).__name__} already belongs to a container; "
                    "append a clone() instead"
                )

            self.shapes.append(shape)
            shape.parent = self

        return self

    def ancestors(self) -> Iterator[Shape]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def remove(self, shape: Shape) -> Self:
        self.shapes.remove(shape)
        shape.parent = None
        return self

    def transform(self, op: GroupOp) -> Self:
        """Adds a group operation, applied in call order."""
        self.operations.append(op)
        return self

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def style(self, layout: Layout) -> str:
        fill = self.fill.serialize(layout) if self.fill is not None else ""
        return attributes(fill, self.stroke.serialize(layout))

    def transform_attribute(self, layout: Layout) -> str:
        ops = [self.wrapper] if self.wrapper else []
        ops.extend(op.render(layout) for op in self.operations)

        if not ops:
            return ""

        return attribute("transform", " ".join(ops))

    def serialize(self, layout: Layout) -> str:
        if not self.shapes:
            return ""

        attrs = attributes(self.style(layout), self.transform_attribute(layout))
        opening = f"<g {attrs}>\n" if attrs else "<g>\n"
        body = "".join(indent(s.serialize(layout)) for s in self.shapes)

        return f"{opening}{body}</g>\n"

    def offset(self, delta: Point) -> None:
        pass


__all__ = [
    "Circle",
    "Container",
    "Ellipse",
    "Line",
    "Path",
    "Polygon",
    "Polyline",
    "Rectangle",
    "Text",
    "Visual",
]
