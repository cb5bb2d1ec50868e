from __future__ import annotations
import os
from typing import TextIO

from .base import Circle, Container, Line, Polygon, Rectangle, Text
from .color import Color, Colors
from .core import Dimensions, Point
from .document import Document
from .layout import Layout
from .sink import Sink
from .style import Fill, Font, Stroke
from .transform import Scaling, Translation


def build_demo(
    target: str | os.PathLike | TextIO | Sink = "my_svg.svg",
    layout: Layout | None = None,
) -> Document:
    """A small page that uses every kind of shape."""
    if layout is None:
        layout = Layout(Dimensions(100, 100), "bottomleft")

    dims = layout.dimensions
    doc = Document(target, layout)

    # Red image border.
    border = Polygon(stroke=Stroke(1, Colors.Red))
    border.append(Point(0, 0)).append(Point(dims.width, 0))
    border.append(Point(dims.width, dims.height)).append(Point(0, dims.height))
    doc.append(border)

    doc.append(
        Circle(
            Point(80, 80),
            20,
            Fill(Color(100, 200, 120)),
            Stroke(1, Color(200, 250, 150)),
        )
    )

    doc.append(Text(Point(5, 77), "Simple SVG", Fill(Colors.Silver), Font(10, "Verdana")))

    doc.append(
        Polygon(
            [
                Point(20, 70),
                Point(25, 72),
                Point(33, 70),
                Point(35, 60),
                Point(25, 55),
                Point(18, 63),
            ],
            Fill(Color(200, 160, 220)),
            Stroke(0.5, Color(150, 160, 200)),
        )
    )

    doc.append(Rectangle(Point(70, 55), 20, 15, Fill(Colors.Yellow)))

    container = Container().append(
        Circle(Point(50, 50), 10, Fill(Colors.Aqua)),
        Container(fill=Fill(), stroke=Stroke(1, Colors.Green)).append(
            Line(Point(15, 15), Point(30, 50)),
            Circle(Point(70, 50), 10, Fill(Colors.Orange)),
        ),
    )
    container.transform(Translation(3, 1.1)).transform(Scaling(1.2))
    doc.append(container)

    return doc
