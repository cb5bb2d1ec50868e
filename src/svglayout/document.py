from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Self, TextIO

from .base import Container
from .core import Shape
from .layout import Layout
from .markup import attribute, attributes, indent
from .sink import Sink, open_sink
from .transform import Transform


log = logging.getLogger(__name__)

PREAMBLE = (
    '<?xml version="1.0" standalone="no"?>\n'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)


class Document:
    """
    A complete SVG document: a layout, the top-level shapes and where to save.

    Shapes are written in user coordinates. Unless the layout already matches
    SVG's own coordinate system, they are either wrapped in a single group
    carrying the correcting transform (mode "wrapper", the default) or mapped
    one coordinate at a time (mode "coordinates").
    """

    def __init__(
        self,
        target: str | os.PathLike | TextIO | Sink,
        layout: Layout | None = None,
    ) -> None:
        self.target = target
        self.layout = layout if layout is not None else Layout()
        self.root = Container()

    @property
    def shapes(self) -> list[Shape]:
        return self.root.shapes

    def append(self, *shapes: Shape) -> Self:
        """Takes ownership of top-level shapes and returns self for chaining."""
        self.root.append(*shapes)
        return self

    def __len__(self) -> int:
        return len(self.root)

    def wrapper(self) -> Transform | None:
        """The group transform the body needs, or None if it needs none."""
        if self.layout.maps_coordinates:
            return None

        t = Transform.for_layout(self.layout)
        return None if t.is_identity else t

    def body(self) -> str:
        t = self.wrapper()

        if t is None:
            self.root.wrapper = None
            return "".join(indent(s.serialize(self.layout)) for s in self.shapes)

        self.root.wrapper = str(t)
        return indent(self.root.serialize(self.layout))

    def render(self) -> str:
        dims = self.layout.dimensions
        log.debug(
            "Rendering %d shapes (origin=%s, mode=%s)",
            len(self),
            self.layout.origin,
            self.layout.mode,
        )

        svg = attributes(
            attribute("width", dims.width, "px"),
            attribute("height", dims.height, "px"),
            attribute("xmlns", "http://www.w3.org/2000/svg"),
            attribute("version", "1.1"),
        )

        return f"{PREAMBLE}<svg {svg}>\n{self.body()}</svg>\n"

    def persist(self) -> bool:
        """
        Writes the rendered document to the target.
        Returns False, without raising, when the target can't be written.
        """
        ok = open_sink(self.target).write(self.render())

        if not ok:
            log.warning("Document was not saved to %r", self.target)

        return ok

    save = persist

    def export(self, path: str | Path, dpi: int = 300) -> None:
        """
        Exports the document to a vector or raster format.

        Supported formats: .svg, .png, .pdf, .ps.
        Everything but .svg requires the 'export' extra (cairosvg).
        """

        svg_data = self.render().encode("utf-8")
        target = str(path)
        extension = Path(path).suffix.lower()

        if extension == ".svg":
            with open(path, "wb") as fp:
                fp.write(svg_data)

            return

        if extension not in (".png", ".pdf", ".ps"):
            raise ValueError(f"Unsupported export format: {extension}")

        try:
            import cairosvg
        except ImportError:
            raise ImportError(
                "Export requires 'cairosvg'. Install with: pip install svglayout[export]"
            )

        match extension:
            case ".png":
                cairosvg.svg2png(bytestring=svg_data, write_to=target, dpi=dpi)
            case ".pdf":
                cairosvg.svg2pdf(bytestring=svg_data, write_to=target, dpi=dpi)
            case ".ps":
                cairosvg.svg2ps(bytestring=svg_data, write_to=target, dpi=dpi)

    def _repr_svg_(self) -> str:
        """Enables automatic rendering in Jupyter/Quarto environments."""
        return self.render()

    def display(self) -> None:
        """Renders the document in an IPython environment."""
        try:
            from IPython.display import SVG, display as ipy_display
        except ImportError as e:
            raise ImportError(
                "IPython is required for display(). "
                "Install with: pip install svglayout[display]"
            ) from e

        ipy_display(SVG(self.render()))

    def __str__(self) -> str:
        return self.render()
