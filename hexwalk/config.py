"""
World generation tuning knobs.
Safe to tweak without touching system code.
"""

from typing import Tuple

# Share of the region's cells the walk tries to open (0.4 = 40%)
WALK_FILL_FRACTION: float = 0.4

# Region radius used by the CLI when none is given
DEFAULT_RADIUS: int = 16

# Hex circumradius in pixels for pixel <-> axial conversions
DEFAULT_HEX_SIZE: float = 16.0

# Walk seed cell and centre of every region
ORIGIN: Tuple[int, int] = (0, 0)
