# wrap.py - fold unbounded axial coordinates into one hexagonal region
from __future__ import annotations

from typing import Iterator, List

from .config import ORIGIN
from .hexgrid import Coord, distance, rotate


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"region radius must be non-negative, got {radius!r}")


def area(radius: int) -> int:
    """Return the number of cells in a hexagon of hexagons with ``radius``."""
    _check_radius(radius)
    return 3 * radius ** 2 + 3 * radius + 1


def in_region(c: Coord, radius: int) -> bool:
    return distance(c, ORIGIN) <= radius


def region_centers(radius: int) -> List[Coord]:
    """Centres of the six copies of the region that surround the canonical one.

    The copies tile the plane; rotation step ``t`` of the base vector
    ``(radius, radius + 1)`` is element ``t`` of the result.
    """
    _check_radius(radius)
    return [rotate((radius, radius + 1), t) for t in range(6)]


def region_cells(radius: int) -> Iterator[Coord]:
    """Iterate every cell of the region, by ascending ``q`` then ``r``."""
    _check_radius(radius)
    for q in range(-radius, radius + 1):
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1):
            yield q, r


class Wrapper:
    """Fold any axial coordinate into the region of a fixed ``radius``.

    Folding repeatedly subtracts the nearest neighbouring region centre until
    the point lands inside; ties between equidistant centres go to the first
    centre in rotation order. This is a toroidal wrap-around with six-fold
    symmetry.
    """

    def __init__(self, radius: int):
        _check_radius(radius)
        self.radius = radius
        self.centers = region_centers(radius)

    def __call__(self, c: Coord) -> Coord:
        q, r = c
        # every fold strictly reduces the distance to the origin
        budget = distance((q, r), ORIGIN) + 1
        for _ in range(budget):
            if distance((q, r), ORIGIN) <= self.radius:
                return q, r
            dq, dr = min(self.centers, key=lambda center: distance((q, r), center))
            q, r = q - dq, r - dr
        raise RuntimeError(f"folding {c!r} into radius {self.radius} did not converge")

    def __repr__(self) -> str:
        return f"Wrapper(radius={self.radius})"


def wrap(c: Coord, radius: int) -> Coord:
    """Return the representative of ``c`` inside the region of ``radius``."""
    return Wrapper(radius)(c)
