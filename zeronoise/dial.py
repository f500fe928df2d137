"""Geometry and text rendering for the circular duration dial.

Angles are measured in degrees clockwise from 12 o'clock. Screen rows grow
downward, so a pointer above the centre has a negative ``dy``.
"""

import math
from typing import Iterable, List, Optional, Tuple

FILLED = "●"
EMPTY = "·"
KNOB = "◉"

# Samples per degree when tracing the ring onto the cell grid
_SAMPLES_PER_DEGREE = 2


def normalize_angle(angle: float) -> float:
    """Wrap any angle into [0, 360)."""
    wrapped = angle % 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


def angle_from_offset(dx: float, dy: float) -> float:
    """Clockwise angle from 12 o'clock for an offset from the centre."""
    if dx == 0 and dy == 0:
        return 0.0
    return normalize_angle(math.degrees(math.atan2(dx, -dy)))


def _ring_geometry(width: int, height: int) -> Tuple[float, float, float, float]:
    cx = (width - 1) / 2
    cy = (height - 1) / 2
    return cx, cy, max(cx, 1.0), max(cy, 1.0)


def point_on_ring(angle: float, width: int, height: int) -> Tuple[int, int]:
    """Cell (column, row) where the ring passes at the given angle."""
    cx, cy, rx, ry = _ring_geometry(width, height)
    rad = math.radians(angle)
    col = int(round(cx + rx * math.sin(rad)))
    row = int(round(cy - ry * math.cos(rad)))
    return col, row


def offset_in_ring(x: float, y: float, width: int, height: int) -> Tuple[float, float]:
    """Offset of a cell from the dial centre, scaled so the ring has radius 1.

    Terminal cells are taller than they are wide, so the ring is an
    ellipse on the grid; scaling each axis by its own radius makes it a
    unit circle.
    """
    cx, cy, rx, ry = _ring_geometry(width, height)
    return (x - cx) / rx, (y - cy) / ry


def render_dial(
    angle: float,
    width: int,
    height: int,
    knob: bool = False,
    center: Optional[Iterable[str]] = None,
) -> str:
    """Render the dial as text.

    Args:
        angle: Sweep of the filled arc in degrees (360 or more fills it).
        width: Columns of the grid.
        height: Rows of the grid.
        knob: Draw the selection knob at the end of the arc.
        center: Lines to place in the middle of the dial.

    Returns:
        The dial as newline-separated rows.
    """
    grid: List[List[str]] = [[" "] * width for _ in range(height)]

    steps = 360 * _SAMPLES_PER_DEGREE
    filled = set()
    ring = set()
    for step in range(steps):
        theta = step / _SAMPLES_PER_DEGREE
        cell = point_on_ring(theta, width, height)
        ring.add(cell)
        if theta < angle:
            filled.add(cell)

    for col, row in ring:
        if 0 <= row < height and 0 <= col < width:
            grid[row][col] = FILLED if (col, row) in filled else EMPTY

    if knob:
        col, row = point_on_ring(min(angle, 360.0), width, height)
        if 0 <= row < height and 0 <= col < width:
            grid[row][col] = KNOB

    if center:
        lines = list(center)
        top = (height - len(lines)) // 2
        for offset, line in enumerate(lines):
            row = top + offset
            if not 0 <= row < height:
                continue
            left = (width - len(line)) // 2
            for i, char in enumerate(line):
                col = left + i
                if 0 <= col < width and char != " ":
                    grid[row][col] = char

    return "\n".join("".join(row).rstrip() for row in grid)
