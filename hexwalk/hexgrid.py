# hexgrid.py - Flat-top hex axial math and helpers (Python 3.10+)
from __future__ import annotations

import math
from typing import Iterator, List, Tuple

import numpy as np

from .vecmath import add, matvec, scale

Coord = Tuple[int, int]
Point = Tuple[float, float]

SQRT3 = math.sqrt(3.0)

# Flat-top basis: columns of AXIAL_TO_PIXEL are the pixel offsets of one step
# along q and one step along r for a hex of circumradius 1.
AXIAL_TO_PIXEL = np.array([
    [3.0 / 2.0, 0.0],
    [SQRT3 / 2.0, SQRT3],
])

PIXEL_TO_AXIAL = np.array([
    [2.0 / 3.0, 0.0],
    [-1.0 / 3.0, SQRT3 / 3.0],
])

# Order matters: it is the enumeration order the walk shuffles from.
DIRECTIONS: Tuple[Coord, ...] = (
    (0, +1),
    (0, -1),
    (-1, +1),
    (+1, -1),
    (+1, 0),
    (-1, 0),
)


def _check_size(size: float) -> None:
    if not size > 0:
        raise ValueError(f"hex size must be positive, got {size!r}")


def cube(q: int, r: int) -> Tuple[int, int, int]:
    """Return the cube completion ``(q, r, s)`` with ``q + r + s == 0``."""
    return q, r, -q - r


def axial_to_offset(q: int, r: int) -> Coord:
    """Convert axial coordinates to odd-q offset (column, row)."""
    col = q
    row = r + (q - (q & 1)) // 2
    return col, row


def offset_to_axial(col: int, row: int) -> Coord:
    """Convert odd-q offset (column, row) back to axial coordinates."""
    q = col
    r = row - (col - (col & 1)) // 2
    return q, r


def _rotate_once(c: Coord) -> Coord:
    q, r, s = cube(*c)
    # (q, r, s) -> (-s, -q, -r)
    return -s, -q


def rotate(c: Coord, steps: int) -> Coord:
    """Rotate ``c`` about the origin by ``steps`` increments of 60 degrees."""
    if steps < 0:
        raise ValueError(f"rotation steps must be non-negative, got {steps!r}")
    for _ in range(steps % 6):
        c = _rotate_once(c)
    return c


def axial_to_pixel(c: Coord, size: float) -> Point:
    """Convert axial hex coordinates to the pixel centre of the hex (flat-top)."""
    _check_size(size)
    return scale(matvec(AXIAL_TO_PIXEL, c), size)


def axial_round(q: float, r: float) -> Coord:
    """Round fractional axial coordinates to the nearest hex.

    Each cube component is rounded independently; the one that moved the most
    is then recomputed from the other two so ``q + r + s == 0`` holds again.
    q is only recomputed when its error is strictly the largest, so ties fall
    to r, then s; either way the recomputed component has the largest error.
    """
    s = -q - r
    rq = int(round(q))
    rr = int(round(r))
    rs = int(round(s))

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return rq, rr


def pixel_to_axial(p: Point, size: float) -> Coord:
    """Return the axial hex whose centre is nearest to pixel ``p``.

    ``size`` must match the size used in :func:`axial_to_pixel`.
    """
    _check_size(size)
    fq, fr = matvec(PIXEL_TO_AXIAL, p)
    return axial_round(fq / size, fr / size)


def distance(a: Coord, b: Coord) -> int:
    """Return hex distance between two axial coords."""
    aq, ar, as_ = cube(*a)
    bq, br, bs = cube(*b)
    return max(abs(aq - bq), abs(ar - br), abs(as_ - bs))


def neighbors(c: Coord) -> List[Coord]:
    """Return the six axial neighbors of ``c`` in :data:`DIRECTIONS` order."""
    return [add(c, d) for d in DIRECTIONS]


def corners(center: Point, size: float) -> List[Point]:
    """Return the 6 polygon corner points of a flat-top hex around ``center``."""
    _check_size(size)
    cx, cy = center
    pts: List[Point] = []
    for i in range(6):
        angle = math.radians(60 * i)
        pts.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return pts


def hex_polygon(c: Coord, size: float) -> List[Point]:
    return corners(axial_to_pixel(c, size), size)


def visible_cells(left: float, top: float, width: float, height: float,
                  size: float) -> Iterator[Coord]:
    """Yield every cell whose outline may overlap the given pixel rectangle.

    The rectangle's corners are picked to offset coordinates and the column
    and row span is padded by one cell on each side, since offset rows
    zig-zag by half a hex between columns.
    """
    if width < 0 or height < 0:
        raise ValueError(f"viewport must have non-negative extent, got {width!r}x{height!r}")
    x0, y0 = axial_to_offset(*pixel_to_axial((left, top), size))
    x1, y1 = axial_to_offset(*pixel_to_axial((left + width, top + height), size))
    for x in range(x0 - 1, x1 + 2):
        for y in range(y0 - 1, y1 + 2):
            yield offset_to_axial(x, y)
