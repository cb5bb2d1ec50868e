from __future__ import annotations
from typing import Self

from .color import Colors
from .core import Bounds, Dimensions, Point, Shape, bounds_of
from .errors import OwnershipError
from .layout import Layout
from .style import Fill, Stroke
from .base import Circle, Polyline


class LineChart(Shape):
    """
    Plots polylines as data series, with a dot on every vertex and an L-shaped
    axis sized 10% beyond the data.
    """

    def __init__(
        self,
        margin: Dimensions | None = None,
        axis_stroke: Stroke | None = None,
    ) -> None:
        super().__init__()
        self.margin = margin if margin is not None else Dimensions(0, 0)
        self.axis_stroke = (
            axis_stroke if axis_stroke is not None else Stroke(0.5, Colors.Purple)
        )
        self.series: list[Polyline] = []

    def append(self, polyline: Polyline) -> Self:
        """
        Takes ownership of a data series. Series without points are ignored.
        """
        if polyline.parent is not None:
            raise OwnershipError(
                "Polyline already belongs to a container; append a clone() instead"
            )

        if polyline.points:
            self.series.append(polyline)
            polyline.parent = self

        return self

    def extent(self) -> Bounds | None:
        """Bounding box of every data point, or None without data."""
        return bounds_of(p for line in self.series for p in line.points)

    def serialize(self, layout: Layout) -> str:
        extent = self.extent()
        if extent is None:
            return ""

        shift = Point(self.margin.width, self.margin.height)
        parts = []

        for line in self.series:
            shifted = line.clone()
            shifted.offset(shift)
            parts.append(shifted.serialize(layout))

            for p in shifted.points:
                dot = Circle(p, extent.height / 30, Fill(Colors.Black))
                parts.append(dot.serialize(layout))

        parts.append(self._axis(extent.dimensions).serialize(layout))
        return "".join(parts)

    def _axis(self, data: Dimensions) -> Polyline:
        w, h = data.width * 1.1, data.height * 1.1
        mx, my = self.margin.width, self.margin.height

        return Polyline(
            [Point(mx, my + h), Point(mx, my), Point(mx + w, my)],
            fill=Fill(Colors.Transparent),
            stroke=self.axis_stroke,
        )

    def offset(self, delta: Point) -> None:
        for line in self.series:
            line.offset(delta)
