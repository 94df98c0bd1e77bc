"""SVG icon reader.

Loads an SVG icon, maps its coordinate system (y down, view box units) into
font units (y up, scaled to the em height) and records the outline with a
fonttools RecordingPen so it can be replayed into several target pens.
"""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib import SVGPath

_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

Bounds = tuple[float, float, float, float]


@dataclass(frozen=True)
class ViewBox:
    """SVG view box in user units."""

    min_x: float
    min_y: float
    width: float
    height: float


@dataclass
class IconOutline:
    """An icon outline in font units.

    Attributes:
        path: Source SVG path
        recording: Drawing commands, already in font coordinates
        advance: Natural advance width in font units
        bounds: (xMin, yMin, xMax, yMax) of the outline, None if empty
    """

    path: str
    recording: RecordingPen
    advance: float
    bounds: Bounds | None


def _length(value: str | None) -> float | None:
    if not value:
        return None
    match = _NUMBER.match(value.strip())
    return float(match.group(0)) if match else None


def parse_view_box(root: ET.Element, default_size: float) -> ViewBox:
    """Get the view box of an SVG root element.

    Falls back to ``width``/``height`` attributes, then to a square of
    ``default_size``.
    """
    view_box = root.get("viewBox")
    if view_box:
        values = [float(v) for v in _NUMBER.findall(view_box)]
        if len(values) == 4 and values[2] > 0 and values[3] > 0:
            return ViewBox(*values)

    width = _length(root.get("width")) or default_size
    height = _length(root.get("height")) or default_size
    return ViewBox(0.0, 0.0, width, height)


def _record(data: bytes, transform: tuple[float, ...]) -> RecordingPen:
    pen = RecordingPen()
    SVGPath.fromstring(data, transform=transform).draw(pen)
    return pen


def _bounds(recording: RecordingPen) -> Bounds | None:
    pen = BoundsPen(None)
    recording.replay(pen)
    return pen.bounds


def read_icon(
    path: str,
    font_height: float,
    descent: float = 0.0,
    normalize: bool = False,
) -> IconOutline:
    """Read an SVG icon into font coordinates.

    The view box height maps onto ``font_height``, the bottom of the view box
    sits ``descent`` units below the baseline. With ``normalize`` the
    outline's own bounding box is scaled to the em height instead, so icons
    drawn with different margins end up the same size.

    Args:
        path: SVG file path
        font_height: Em height in font units
        descent: Distance of the em bottom below the baseline
        normalize: Scale by outline bounds rather than by view box

    Returns:
        IconOutline in font units

    Raises:
        FileNotFoundError: If the SVG file does not exist
    """
    data = Path(path).read_bytes()
    root = ET.fromstring(data)
    box = parse_view_box(root, default_size=font_height)

    min_x, min_y, width, height = box.min_x, box.min_y, box.width, box.height
    if normalize:
        raw_bounds = _bounds(_record(data, (1, 0, 0, 1, 0, 0)))
        if raw_bounds is not None and raw_bounds[3] > raw_bounds[1]:
            x_min, y_min, x_max, y_max = raw_bounds
            min_x, min_y = x_min, y_min
            width, height = x_max - x_min, y_max - y_min

    scale = font_height / height
    transform = (
        scale,
        0,
        0,
        -scale,
        -scale * min_x,
        scale * (min_y + height) - descent,
    )

    recording = _record(data, transform)
    return IconOutline(
        path=path,
        recording=recording,
        advance=width * scale,
        bounds=_bounds(recording),
    )
