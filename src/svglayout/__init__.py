import logging

from .core import Shape, Bounds, Dimensions, Point, bounds_of, min_point, max_point
from .color import Color, Colors
from .style import Fill, Stroke, Font
from .layout import Layout, Origin, Mode
from .transform import (
    Transform,
    Translation,
    Scaling,
    Rotation,
    map_x,
    map_y,
    map_length,
)
from .base import (
    Circle,
    Ellipse,
    Rectangle,
    Line,
    Polygon,
    Polyline,
    Path,
    Text,
    Container,
)
from .chart import LineChart
from .document import Document
from .sink import Sink, FileSink, StreamSink
from .errors import SvgLayoutError, OwnershipError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
