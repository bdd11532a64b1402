# SPDX-License-Identifier: MIT
"""
idwpy.coords
============

Coordinate shapes and the distance between two coordinates.

Three coordinate shapes are supported:

- scalar (1D)  : ``x``
- pair   (2D)  : ``(x, y)``
- triple (3D)  : ``(x, y, z)``

Each shape has its own distance function, registered in
:data:`DISTANCE_FUNCTIONS` under its dimension. The functions broadcast, so
the same call works for two single coordinates or for an ``(n, k)`` array of
sample points against one ``(k,)`` query position:

- :func:`scalar_distance`: absolute difference.
- :func:`pair_distance`  : Euclidean distance in the plane.
- :func:`triple_distance`: Euclidean distance in space.

:func:`distance` is the convenience entry point for two single coordinates
of any supported shape.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple, Union

import numpy as np

Coordinate = Union[float, Tuple[float, float], Tuple[float, float, float]]

DistanceFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


# ---------------------------------------------------------------------------
# Per-shape distances
# ---------------------------------------------------------------------------


def scalar_distance(a, b) -> np.ndarray:
    """
    Distance between scalar coordinates: ``|a - b|``.
    """
    return np.abs(np.subtract(b, a))


def pair_distance(a, b) -> np.ndarray:
    """
    Euclidean distance between ``(x, y)`` coordinates.

    The last axis holds the components; leading axes broadcast.
    """
    d = np.subtract(b, a)
    dx = d[..., 0]
    dy = d[..., 1]
    return np.sqrt(dx * dx + dy * dy)


def triple_distance(a, b) -> np.ndarray:
    """
    Euclidean distance between ``(x, y, z)`` coordinates.

    The last axis holds the components; leading axes broadcast.
    """
    d = np.subtract(b, a)
    dx = d[..., 0]
    dy = d[..., 1]
    dz = d[..., 2]
    return np.sqrt(dx * dx + dy * dy + dz * dz)


DISTANCE_FUNCTIONS: Dict[int, DistanceFunction] = {
    1: scalar_distance,
    2: pair_distance,
    3: triple_distance,
}


# ---------------------------------------------------------------------------
# Shape helpers
# ---------------------------------------------------------------------------


def distance_function(ndim: int) -> DistanceFunction:
    """
    Return the distance function registered for a coordinate dimension.

    Raises
    ------
    ValueError
        If ``ndim`` is not one of 1, 2 or 3.
    """
    try:
        return DISTANCE_FUNCTIONS[int(ndim)]
    except KeyError:
        raise ValueError(
            f"Unsupported coordinate dimension {ndim}. "
            f"Supported dimensions are: {sorted(DISTANCE_FUNCTIONS)}."
        ) from None


def coordinate_dim(coord) -> int:
    """
    Dimension of a single coordinate.

    A scalar (or a length-1 sequence) is 1D, a length-2 sequence is 2D and a
    length-3 sequence is 3D.

    Raises
    ------
    ValueError
        For any other shape.
    """
    arr = np.asarray(coord)
    if arr.ndim == 0:
        return 1
    if arr.ndim == 1 and arr.shape[0] in (1, 2, 3):
        return int(arr.shape[0])
    raise ValueError(
        f"Coordinate must be a scalar or a sequence of 2 or 3 numbers; "
        f"got shape {arr.shape}."
    )


def as_position(coord, ndim: int, dtype=np.float64) -> np.ndarray:
    """
    Convert a single coordinate to the array layout used for ``ndim``.

    1D coordinates become 0-d arrays, 2D/3D coordinates become ``(ndim,)``
    arrays.

    Raises
    ------
    ValueError
        If the coordinate does not have dimension ``ndim``.
    """
    dim = coordinate_dim(coord)
    if dim != ndim:
        raise ValueError(
            f"Expected a {ndim}D coordinate, got a {dim}D coordinate: {coord!r}."
        )
    arr = np.asarray(coord, dtype=dtype)
    if ndim == 1:
        return arr.reshape(())
    return arr


def distance(a: Coordinate, b: Coordinate) -> float:
    """
    Distance between two coordinates of the same shape.

    Parameters
    ----------
    a, b : float or tuple of float
        Scalars, pairs or triples. Both must have the same shape.

    Returns
    -------
    float
        Non-negative distance; ``distance(a, a) == 0`` and
        ``distance(a, b) == distance(b, a)``.

    Raises
    ------
    ValueError
        If the shapes differ or are unsupported.
    """
    ndim = coordinate_dim(a)
    pa = as_position(a, ndim)
    pb = as_position(b, ndim)
    return float(DISTANCE_FUNCTIONS[ndim](pa, pb))


__all__ = [
    "Coordinate",
    "DISTANCE_FUNCTIONS",
    "scalar_distance",
    "pair_distance",
    "triple_distance",
    "distance_function",
    "coordinate_dim",
    "as_position",
    "distance",
]
