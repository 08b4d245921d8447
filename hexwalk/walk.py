# walk.py - randomized backtracking "drunkard's walk" over a folded region
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from .hexgrid import DIRECTIONS, Coord
from .vecmath import RngLike, add, make_rng, shuffled
from .wrap import Wrapper

if TYPE_CHECKING:
    from .world import OccupancyMap

logger = logging.getLogger(__name__)


class RandomWalk:
    """Depth-first, self-avoiding random walk with backtracking.

    Every call to :meth:`step` returns one cell that was not open when the
    call began, or ``None`` once the walk has nowhere left to go. Each
    returned cell is a folded neighbour of the start cell or of a cell
    returned earlier, so the set of returned cells is connected to ``start``.

    The walk only *reads* ``occupancy``. The caller must mark every returned
    cell open before calling :meth:`step` again, otherwise the same cell can
    be returned twice.

    See https://www.reddit.com/r/roguelikedev/comments/hhzszb/ for the
    modified drunkard's walk this follows.
    """

    def __init__(self, start: Coord, occupancy: "OccupancyMap", radius: int,
                 rng: RngLike = None):
        self.wrap = Wrapper(radius)
        self.occupancy = occupancy
        self.rng = make_rng(rng)
        self.current: Coord = self.wrap(start)
        self.stack: List[Coord] = [self.current]

    @property
    def radius(self) -> int:
        return self.wrap.radius

    @property
    def exhausted(self) -> bool:
        return not self.stack

    def step(self) -> Optional[Coord]:
        """Advance to the next unopened cell, backtracking as needed."""
        while self.stack:
            for direction in shuffled(DIRECTIONS, self.rng):
                candidate = self.wrap(add(self.current, direction))
                if not self.occupancy.is_open(candidate):
                    self.stack.append(candidate)
                    self.current = candidate
                    return candidate

            # dead end: drop it and retry from the cell we came from
            self.stack.pop()
            if self.stack:
                self.current = self.stack[-1]

        logger.debug("random walk in radius %d exhausted", self.radius)
        return None

    def __iter__(self) -> "RandomWalk":
        return self

    def __next__(self) -> Coord:
        cell = self.step()
        if cell is None:
            raise StopIteration
        return cell


def random_walk(start: Coord, occupancy: "OccupancyMap", radius: int,
                rng: RngLike = None) -> RandomWalk:
    return RandomWalk(start, occupancy, radius, rng)
