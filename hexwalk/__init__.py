# hexwalk/__init__.py
# Hex grid geometry, region folding and random-walk world generation

from .hexgrid import (
    Coord, Point, SQRT3, DIRECTIONS, AXIAL_TO_PIXEL, PIXEL_TO_AXIAL,
    cube, axial_to_offset, offset_to_axial, rotate, axial_to_pixel, pixel_to_axial,
    axial_round, distance, neighbors, corners, hex_polygon, visible_cells,
)
from .vecmath import dot, matvec, add, make_rng, shuffled
from .wrap import Wrapper, wrap, area, in_region, region_centers, region_cells
from .walk import RandomWalk, random_walk
from .world import (
    OccupancyMap,
    World,
    step_budget,
    generate_world,
    is_connected,
    render_ascii,
)

__all__ = [
    "Coord", "Point", "SQRT3", "DIRECTIONS", "AXIAL_TO_PIXEL", "PIXEL_TO_AXIAL",
    "cube", "axial_to_offset", "offset_to_axial", "rotate", "axial_to_pixel", "pixel_to_axial",
    "axial_round", "distance", "neighbors", "corners", "hex_polygon", "visible_cells",
    "dot", "matvec", "add", "make_rng", "shuffled",
    "Wrapper", "wrap", "area", "in_region", "region_centers", "region_cells",
    "RandomWalk", "random_walk",
    "OccupancyMap", "World", "step_budget", "generate_world", "is_connected", "render_ascii",
]
