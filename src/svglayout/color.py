from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, overload


@dataclass(frozen=True)
class Color:
    """
    An RGB colour, or the transparent colour.
    Channels are expected in [0, 255] but are never clamped.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    transparent: bool = False

    @classmethod
    def none(cls) -> Color:
        return cls(transparent=True)

    def __str__(self) -> str:
        if self.transparent:
            return "none"
        return f"rgb({self.r},{self.g},{self.b})"


class Colors:
    """The named colour presets."""

    Transparent = Color.none()
    Aqua = Color(0, 255, 255)
    Black = Color(0, 0, 0)
    Blue = Color(0, 0, 255)
    Brown = Color(165, 42, 42)
    Cyan = Color(0, 255, 255)
    Fuchsia = Color(255, 0, 255)
    Green = Color(0, 128, 0)
    Lime = Color(0, 255, 0)
    Magenta = Color(255, 0, 255)
    Orange = Color(255, 165, 0)
    Purple = Color(128, 0, 128)
    Red = Color(255, 0, 0)
    Silver = Color(192, 192, 192)
    White = Color(255, 255, 255)
    Yellow = Color(255, 255, 0)

    @classmethod
    def names(cls) -> list[str]:
        return [
            name
            for name, value in vars(cls).items()
            if isinstance(value, Color)
        ]

    @classmethod
    def all(cls) -> Iterator[Color]:
        for name in cls.names():
            yield getattr(cls, name)

    @classmethod
    def get(cls, name: str) -> Color:
        """Looks up a preset by name, case-insensitively."""
        for candidate in cls.names():
            if candidate.lower() == name.lower():
                return getattr(cls, candidate)

        raise ValueError(f"Unknown color: {name}")

    @classmethod
    def get_name(cls, color: Color) -> str | None:
        """Returns the first preset name for the colour, if any."""
        for name in cls.names():
            if getattr(cls, name) == color:
                return name

        return None


@overload
def hex(value: Color) -> str: ...


@overload
def hex(value: str) -> Color: ...


def hex(value: Color | str) -> str | Color:
    """Converts a colour to '#rrggbb', or parses '#rrggbb' / '#rgb' into a colour."""
    if isinstance(value, Color):
        if value.transparent:
            return "none"
        return f"#{value.r:02x}{value.g:02x}{value.b:02x}"

    digits = value.lstrip("#")

    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {value}")

    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb(r: int, g: int, b: int) -> Color:
    return Color(r, g, b)
