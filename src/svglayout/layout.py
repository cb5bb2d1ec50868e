from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Literal, get_args

from .core import Dimensions, Point


type Origin = Literal["topleft", "bottomleft", "topright", "bottomright"]

# "wrapper": shapes keep user coordinates and the document wraps them in one
# group transform. "coordinates": every coordinate is mapped individually.
type Mode = Literal["wrapper", "coordinates"]

ORIGINS: tuple[str, ...] = get_args(Origin.__value__)
MODES: tuple[str, ...] = get_args(Mode.__value__)


@dataclass(frozen=True)
class Layout:
    """
    Describes the target canvas and how user coordinates relate to it.

    Args:
        dimensions: Size of the SVG canvas in pixels.
        origin: Canvas corner that user-space (0, 0) corresponds to.
        scale: User units per pixel multiplier.
        origin_offset: Added to every user coordinate before scaling.
        mode: How the coordinate correction is emitted.
    """

    dimensions: Dimensions = field(default_factory=lambda: Dimensions(400, 300))
    origin: Origin = "bottomleft"
    scale: float = 1.0
    origin_offset: Point = field(default_factory=Point.zero)
    mode: Mode = "wrapper"

    def __post_init__(self) -> None:
        if self.origin not in ORIGINS:
            raise ValueError(f"Unknown origin: {self.origin}")
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode: {self.mode}")

    @property
    def flips_x(self) -> bool:
        """True when the origin sits on the right edge."""
        return self.origin in ("topright", "bottomright")

    @property
    def flips_y(self) -> bool:
        """True when the origin sits on the bottom edge."""
        return self.origin in ("bottomleft", "bottomright")

    @property
    def is_identity(self) -> bool:
        return (
            self.origin == "topleft"
            and self.scale == 1
            and self.origin_offset == Point.zero()
        )

    @property
    def maps_coordinates(self) -> bool:
        return self.mode == "coordinates"

    def with_mode(self, mode: Mode) -> Layout:
        return replace(self, mode=mode)
