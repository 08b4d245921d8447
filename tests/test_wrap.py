import numpy as np
import pytest

from hexwalk.hexgrid import distance
from hexwalk.vecmath import add
from hexwalk.wrap import Wrapper, area, in_region, region_cells, region_centers, wrap


def _random_cells(seed, n=200, span=150):
    rng = np.random.default_rng(seed)
    for _ in range(n):
        yield tuple(int(v) for v in rng.integers(-span, span + 1, size=2))


def test_area_matches_region_cells():
    for radius in range(0, 8):
        cells = list(region_cells(radius))
        assert len(cells) == len(set(cells)) == area(radius)
        assert all(in_region(c, radius) for c in cells)
    assert area(3) == 37


def test_wrap_lands_inside_region():
    for radius in range(0, 7):
        for c in _random_cells(radius):
            assert distance(wrap(c, radius), (0, 0)) <= radius


def test_wrap_fixes_interior_cells():
    for radius in range(0, 6):
        for c in region_cells(radius):
            assert wrap(c, radius) == c


def test_wrap_is_idempotent():
    for radius in (0, 1, 4, 9):
        fold = Wrapper(radius)
        for c in _random_cells(100 + radius):
            once = fold(c)
            assert fold(once) == once


def test_wrap_is_translation_invariant_between_copies():
    radius = 4
    for centre in region_centers(radius):
        for c in region_cells(radius):
            assert wrap(add(c, centre), radius) == c


def test_region_centers_fold_to_origin():
    for radius in range(0, 5):
        centers = region_centers(radius)
        assert centers[0] == (radius, radius + 1)
        assert len(set(centers)) == 6
        for centre in centers:
            assert wrap(centre, radius) == (0, 0)


def test_radius_zero_folds_everything_to_origin():
    for c in _random_cells(5, n=50, span=20):
        assert wrap(c, 0) == (0, 0)


def test_far_coordinates_fold():
    assert distance(wrap((10_000, -3_217), 5), (0, 0)) <= 5


def test_negative_radius_fails_fast():
    with pytest.raises(ValueError):
        wrap((0, 0), -1)
    with pytest.raises(ValueError):
        Wrapper(-3)
    with pytest.raises(ValueError):
        area(-1)
