# vecmath.py - tiny 2-vector / 2x2 matrix helpers and random selection
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TypeVar, Union

import numpy as np

T = TypeVar("T")
Pair = Tuple[float, float]
RngLike = Union[None, int, np.random.Generator]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 2-vectors."""
    return float(np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))


def matvec(m: np.ndarray, v: Sequence[float]) -> Pair:
    """Multiply a 2x2 matrix by a column 2-vector."""
    x, y = np.asarray(m, dtype=np.float64) @ np.asarray(v, dtype=np.float64)
    return float(x), float(y)


def add(a: Sequence, b: Sequence) -> tuple:
    # plain ints stay ints so the result can be used as a dict key
    return tuple(x + y for x, y in zip(a, b))


def scale(v: Sequence[float], k: float) -> Pair:
    return float(v[0] * k), float(v[1] * k)


def make_rng(seed: RngLike = None) -> np.random.Generator:
    """Return a ``numpy.random.Generator`` for ``seed``.

    An existing generator is passed through untouched so callers can share one
    stream across several walks; ``None`` draws fresh OS entropy.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def shuffled(items: Sequence[T], rng: Optional[np.random.Generator] = None) -> List[T]:
    """Return a new list with ``items`` in uniformly random order."""
    rng = make_rng(rng)
    order = rng.permutation(len(items))
    return [items[int(i)] for i in order]
