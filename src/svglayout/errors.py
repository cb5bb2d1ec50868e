from __future__ import annotations


class SvgLayoutError(Exception):
    """Base error of the package."""


class OwnershipError(SvgLayoutError, RuntimeError):
    """A shape was handed to a second owner while still owned by another."""
