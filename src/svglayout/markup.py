"""
Small helpers for writing SVG markup by hand.
"""

from __future__ import annotations
import re
from xml.sax.saxutils import escape, quoteattr


def fmt(value: float | str) -> str:
    """
    Formats a number the way it should appear in an attribute.

    Integral values drop their fractional part, floats are rounded to
    six decimals and negative zero prints as 0.
    """
    if isinstance(value, str):
        return value

    value = round(float(value), 6) + 0.0

    if value.is_integer():
        return str(int(value))

    return f"{value:.10g}"


def attribute(name: str, value: float | str, unit: str = "") -> str:
    return f"{name}={quoteattr(fmt(value) + unit)}"


def attributes(*parts: str) -> str:
    """Joins attribute strings, skipping empty ones."""
    return " ".join(p for p in parts if p)


def element(tag: str, *parts: str) -> str:
    """A self-closing element on its own line."""
    attrs = attributes(*parts)
    return f"<{tag} {attrs} />\n" if attrs else f"<{tag} />\n"


def text_element(tag: str, content: str, *parts: str) -> str:
    attrs = attributes(*parts)
    opening = f"<{tag} {attrs}>" if attrs else f"<{tag}>"
    return f"{opening}{escape(content)}</{tag}>\n"


def coords(x: float, y: float) -> str:
    return f"{fmt(x)},{fmt(y)}"


def indent(fragment: str) -> str:
    """
    Prefixes a tab to every non-empty line of the fragment.
    Only newline characters break lines; other separators inside text
    content are left alone, and the trailing newline stays unindented.
    """
    return "".join(
        f"\t{line}" if line.strip("\n") else line
        for line in re.split(r"(?<=\n)", fragment)
    )
