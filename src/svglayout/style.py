from __future__ import annotations
from dataclasses import dataclass, field

from .color import Color, Colors
from .layout import Layout
from .markup import attribute, attributes
from .transform import place_length


@dataclass(frozen=True)
class Fill:
    color: Color = field(default=Colors.Transparent)

    def serialize(self, layout: Layout) -> str:
        return attribute("fill", str(self.color))


@dataclass(frozen=True)
class Stroke:
    """
    Outline style. A negative width means "no stroke" and serializes to nothing.
    A non-scaling stroke keeps its width whatever the layout scale.
    """

    width: float = -1
    color: Color = field(default=Colors.Transparent)
    non_scaling: bool = False

    @property
    def is_absent(self) -> bool:
        return self.width < 0

    def serialize(self, layout: Layout) -> str:
        if self.is_absent:
            return ""

        # Non-scaling widths are in screen units
        width = self.width if self.non_scaling else place_length(self.width, layout)

        return attributes(
            attribute("stroke-width", width),
            attribute("stroke", str(self.color)),
            attribute("vector-effect", "non-scaling-stroke") if self.non_scaling else "",
        )


@dataclass(frozen=True)
class Font:
    size: float = 12
    family: str = "Verdana"

    def serialize(self, layout: Layout) -> str:
        return attributes(
            attribute("font-size", place_length(self.size, layout)),
            attribute("font-family", self.family),
        )
