# world.py - drive the random walk and record which cells it opened
from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from itertools import islice
from typing import FrozenSet, Iterator, List, Set

from .config import ORIGIN, WALK_FILL_FRACTION
from .hexgrid import Coord, axial_to_offset, neighbors, offset_to_axial
from .vecmath import RngLike
from .walk import RandomWalk
from .wrap import Wrapper, area, in_region, region_cells

logger = logging.getLogger(__name__)


class OccupancyMap:
    """Sparse record of open cells.

    Absent cells read as closed; reading never inserts anything.
    """

    def __init__(self) -> None:
        self._open: Set[Coord] = set()

    def is_open(self, c: Coord) -> bool:
        return tuple(c) in self._open

    def mark_open(self, c: Coord) -> bool:
        """Open ``c``. Returns True if it was not already open."""
        key = (int(c[0]), int(c[1]))
        if key in self._open:
            return False
        self._open.add(key)
        return True

    def cells(self) -> FrozenSet[Coord]:
        return frozenset(self._open)

    def __contains__(self, c: object) -> bool:
        return isinstance(c, tuple) and c in self._open

    def __len__(self) -> int:
        return len(self._open)

    def __iter__(self) -> Iterator[Coord]:
        return iter(sorted(self._open))

    def __repr__(self) -> str:
        return f"OccupancyMap({len(self._open)} open)"


@dataclass
class World:
    """One generated region and its open cells."""

    radius: int
    occupancy: OccupancyMap = field(default_factory=OccupancyMap)
    requested_steps: int = 0

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"region radius must be non-negative, got {self.radius!r}")
        self._wrap = Wrapper(self.radius)

    def is_open(self, c: Coord) -> bool:
        """Whether ``c`` is open, for any cell of the unbounded tiled plane."""
        return self.occupancy.is_open(self._wrap(c))

    @property
    def open_count(self) -> int:
        return len(self.occupancy)

    @property
    def fill_ratio(self) -> float:
        return self.open_count / area(self.radius)

    def summary(self) -> str:
        return (f"radius={self.radius} cells={area(self.radius)} "
                f"requested={self.requested_steps} open={self.open_count} "
                f"fill={self.fill_ratio:.1%}")


def step_budget(radius: int, fraction: float = WALK_FILL_FRACTION) -> int:
    """Number of walk steps for a region: ``floor(fraction * area(radius))``."""
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"fill fraction must be within [0, 1], got {fraction!r}")
    return int(math.floor(fraction * area(radius)))


def generate_world(radius: int, rng: RngLike = None,
                   fraction: float = WALK_FILL_FRACTION) -> World:
    """Carve a connected open area into the region of ``radius``.

    The walk starts at the origin and runs for :func:`step_budget` steps at
    most. A walk that runs out of unopened cells early simply leaves a smaller
    world.
    """
    world = World(radius=radius, requested_steps=step_budget(radius, fraction))
    logger.debug("generating radius %d world, budget %d steps", radius, world.requested_steps)

    walk = RandomWalk(ORIGIN, world.occupancy, radius, rng)
    for cell in islice(walk, world.requested_steps):
        # must land before the next pull, the walk reads this map
        world.occupancy.mark_open(cell)

    if world.open_count < world.requested_steps:
        logger.info("walk exhausted after %d of %d steps", world.open_count, world.requested_steps)
    logger.info("generated world: %s", world.summary())
    return world


def is_connected(world: World) -> bool:
    """Whether every open cell is reachable from the origin through open cells.

    Adjacency is taken on the folded region, so stepping off one edge
    re-enters on the opposite side.
    """
    wrap = Wrapper(world.radius)
    start = wrap(ORIGIN)
    seen: Set[Coord] = {start}
    frontier = deque([start])
    while frontier:
        current = frontier.popleft()
        for nxt in neighbors(current):
            nxt = wrap(nxt)
            if nxt in seen or not world.occupancy.is_open(nxt):
                continue
            seen.add(nxt)
            frontier.append(nxt)
    return world.occupancy.cells() <= seen


def render_ascii(world: World, open_char: str = "#", closed_char: str = ".") -> str:
    """Render the region as text, one line per offset row."""
    offsets = [axial_to_offset(*c) for c in region_cells(world.radius)]
    cols = [x for x, _ in offsets]
    rows = [y for _, y in offsets]

    lines: List[str] = []
    for y in range(min(rows), max(rows) + 1):
        line = []
        for x in range(min(cols), max(cols) + 1):
            c = offset_to_axial(x, y)
            if not in_region(c, world.radius):
                line.append(" ")
            elif world.occupancy.is_open(c):
                line.append(open_char)
            else:
                line.append(closed_char)
        lines.append("".join(line).rstrip())
    return "\n".join(lines)
