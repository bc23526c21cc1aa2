"""Circular progress indicator geometry and text rendering.

`arc_geometry` is the renderer-neutral contract for drawing the progress arc
(start at the top, clockwise sweep, large-arc flag past one half); any path
based front end can feed it straight to an arc primitive. The terminal app
draws with `render_ring`, which sweeps the same angles cell by cell.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

Point = Tuple[float, float]

START_ANGLE = -90.0  # top center, screen coordinates (y grows downward)

FILLED = "●"
TRACK = "·"


@dataclass(frozen=True)
class Arc:
    """A clockwise arc segment ready to hand to a path renderer."""
    start: Point
    end: Point
    radius: float
    large_arc: bool
    clockwise: bool = True


def _clamp(fraction: float) -> float:
    return min(1.0, max(0.0, fraction))


def polar(radius: float, degrees: float, center: Point = (0.0, 0.0)) -> Point:
    """Point on a circle at the given angle."""
    rad = math.radians(degrees)
    return (center[0] + radius * math.cos(rad), center[1] + radius * math.sin(rad))


def arc_geometry(fraction: float, radius: float, center: Point = (0.0, 0.0)) -> Arc:
    """Map a progress fraction to an arc starting at the top, sweeping clockwise."""
    fraction = _clamp(fraction)
    end_angle = START_ANGLE + fraction * 360.0
    return Arc(
        start=polar(radius, START_ANGLE, center),
        end=polar(radius, end_angle, center),
        radius=radius,
        large_arc=fraction > 0.5,
    )


def clockwise_angle(dx: float, dy: float) -> float:
    """Clockwise angle in degrees from the top for an offset from the center."""
    return (math.degrees(math.atan2(dy, dx)) - START_ANGLE) % 360.0


def render_ring(fraction: float, radius: int = 6) -> str:
    """Render the ring as text.

    Cells on the circle are drawn FILLED up to the swept angle and TRACK after
    it. Columns are stretched by two because terminal cells are about twice as
    tall as they are wide.
    """
    fraction = _clamp(fraction)
    sweep = fraction * 360.0
    width = radius * 4 + 1
    height = radius * 2 + 1
    grid: List[List[str]] = [[" "] * width for _ in range(height)]

    for row in range(height):
        for col in range(width):
            dx = (col - radius * 2) / 2.0
            dy = row - radius
            if abs(math.hypot(dx, dy) - radius) > 0.5:
                continue
            grid[row][col] = FILLED if clockwise_angle(dx, dy) < sweep else TRACK

    return "\n".join("".join(line).rstrip() for line in grid)
