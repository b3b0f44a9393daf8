"""Nearest-neighbour search over auxiliary coordinates.

The local mean variance estimator only needs two capabilities: building an
index over a coordinate matrix and asking it for the ``k`` nearest indexed
points of a query point. Any object satisfying ``SpatialIndexBuilder`` can be
passed in; ``KDTreeBuilder`` wraps ``scipy.spatial.cKDTree``.
"""

from typing import List, Protocol

import numpy as np
from scipy.spatial import cKDTree

from ppsample.errors import InputShapeError, RangeError


class SpatialIndex(Protocol):
    data: np.ndarray

    def query(self, point, k: int) -> List[int]:
        ...


class SpatialIndexBuilder(Protocol):
    def build(self, coordinates) -> SpatialIndex:
        ...


def as_coordinates(coordinates) -> np.ndarray:
    """Convert coordinates to a 2-D float array with one row per unit."""
    data = np.asarray(coordinates, dtype=float)
    if data.ndim == 1:
        data = data.reshape(-1, 1)
    if data.ndim != 2:
        raise InputShapeError(
            f"Coordinates must be a 1-D or 2-D array, got {data.ndim} dimensions"
        )
    return data


class KDTreeIndex:
    """Exact k-nearest-neighbour index backed by a k-d tree.

    A query point that is itself indexed is returned among its neighbours.
    """

    def __init__(self, coordinates, leafsize: int = 16):
        self.data = as_coordinates(coordinates)
        self._tree = cKDTree(self.data, leafsize=leafsize)

    def __len__(self) -> int:
        return self.data.shape[0]

    def query(self, point, k: int) -> List[int]:
        if k < 1:
            raise RangeError(f"k must be positive, got {k}")

        k = min(k, len(self))
        _, neighbours = self._tree.query(np.asarray(point, dtype=float), k=k)
        return [int(i) for i in np.atleast_1d(neighbours)]


class KDTreeBuilder:
    def __init__(self, leafsize: int = 16):
        self.leafsize = leafsize

    def build(self, coordinates) -> KDTreeIndex:
        return KDTreeIndex(coordinates, leafsize=self.leafsize)
