# SPDX-License-Identifier: MIT
"""
idwpy.idw
=========

Inverse Distance Weighting (IDW) interpolator.

For a query position ``x`` and samples ``(p_i, v_i)`` the interpolated value
is

    u(x) = sum_i w_i * v_i

with raw weights ``w_i = 1 / d(p_i, x) ** power``, normalized to sum to 1.
When a weight transform ``f`` is configured, the normalized weights are
mapped through ``f`` and normalized again before blending.

If the query coincides exactly with a sample (distance ``== 0``, no
tolerance), the value of the first such sample is returned as is.

The sample set is fixed at construction. ``with_power`` and
``with_weight_transform`` return new interpolators that share the read-only
sample arrays, so a configured instance can be evaluated from many threads.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Sequence

import numpy as np

from .coords import Coordinate, as_position, distance_function
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

WeightTransform = Callable[[float], float]

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

DEFAULT_POWER = 2.0


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IDWParams:
    """
    Evaluation parameters of an :class:`IDW` interpolator.

    Attributes
    ----------
    power : float, default 2.0
        Exponent applied to distances before inversion. Not validated; zero,
        negative and fractional values are all accepted.
    weighted_function : callable or None, default None
        Transform applied to each normalized weight. ``None`` means identity.
    """

    power: float = DEFAULT_POWER
    weighted_function: Optional[WeightTransform] = None


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _resolve_dtype(dtype) -> np.dtype:
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid dtype {dtype!r}.") from exc
    if dt not in SUPPORTED_DTYPES:
        raise ConfigurationError(
            f"Unsupported dtype '{dt}'. Use one of: {[str(d) for d in SUPPORTED_DTYPES]}."
        )
    return dt


def _as_array(data, dtype: np.dtype, name: str) -> np.ndarray:
    try:
        arr = np.array(data, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"{name} must be a sequence of numbers of one shape: {exc}"
        ) from exc
    if arr.ndim == 0:
        raise ConfigurationError(f"{name} must be a sequence, got a scalar.")
    return arr


def _points_dim(points: np.ndarray) -> int:
    if points.ndim == 1:
        return 1
    if points.ndim == 2 and points.shape[1] in (1, 2, 3):
        return int(points.shape[1])
    raise ConfigurationError(
        "points must be scalars, pairs or triples; "
        f"got an array of shape {points.shape}."
    )


def normalize_weights(weights: np.ndarray) -> np.ndarray:
    """
    Scale ``weights`` so that they sum to 1.

    No guard against a zero or non-finite sum; NaN/Inf propagate.
    """
    return weights / weights.sum()


def _first_exact_match(distances: np.ndarray) -> Optional[int]:
    hits = np.flatnonzero(distances == 0)
    if hits.size == 0:
        return None
    return int(hits[0])


# ---------------------------------------------------------------------------
# Interpolator
# ---------------------------------------------------------------------------


class IDW:
    """
    Inverse Distance Weighting interpolator over 1D, 2D or 3D samples.

    Parameters
    ----------
    points : sequence
        Sample coordinates: scalars (1D), pairs (2D) or triples (3D).
    values : sequence of float
        One value per point.
    power : float, default 2.0
        Power parameter of the weighting ``1 / d ** power``.
    weighted_function : callable or None, default None
        Optional transform applied to the normalized weights.
    dtype : {numpy.float64, numpy.float32}, default numpy.float64
        Floating-point type used for coordinates, values and arithmetic.

    Raises
    ------
    ConfigurationError
        If ``points`` or ``values`` is empty, their lengths differ, or the
        points do not share one supported shape.

    Examples
    --------
    >>> idw = IDW([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    >>> round(float(idw.evaluate(0.0)), 6)
    1.346939
    >>> float(idw.with_power(0.5).evaluate(2.0))
    2.0
    """

    def __init__(
        self,
        points: Sequence[Coordinate],
        values: Sequence[float],
        *,
        power: float = DEFAULT_POWER,
        weighted_function: Optional[WeightTransform] = None,
        dtype=np.float64,
    ) -> None:
        dt = _resolve_dtype(dtype)
        pts = _as_array(points, dt, "points")
        vals = _as_array(values, dt, "values")

        if pts.shape[0] == 0:
            raise ConfigurationError("Points must not be empty.")
        if vals.shape[0] == 0:
            raise ConfigurationError("Values must not be empty.")
        if pts.shape[0] != vals.shape[0]:
            raise ConfigurationError(
                "Points and values must be the same length. "
                f"Got {pts.shape[0]} points and {vals.shape[0]} values."
            )
        if vals.ndim != 1:
            raise ConfigurationError(
                f"values must be a flat sequence of numbers; got shape {vals.shape}."
            )

        ndim = _points_dim(pts)
        if ndim == 1:
            pts = pts.reshape(-1)

        pts.setflags(write=False)
        vals.setflags(write=False)

        self._points = pts
        self._values = vals
        self._ndim = ndim
        self._dtype = dt
        self._distance = distance_function(ndim)
        self._params = IDWParams(power=power, weighted_function=weighted_function)

        logger.debug(
            "Built IDW with %d samples (ndim=%d, dtype=%s, power=%r).",
            len(vals), ndim, dt, power,
        )

    # ------------------------------------------------------------------ #
    # Read-only state
    # ------------------------------------------------------------------ #

    @property
    def points(self) -> np.ndarray:
        """Sample coordinates, shape ``(n,)`` in 1D or ``(n, ndim)``."""
        return self._points

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def ndim(self) -> int:
        return self._ndim

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def n_samples(self) -> int:
        return int(self._values.shape[0])

    @property
    def params(self) -> IDWParams:
        return self._params

    @property
    def power_parameter(self) -> float:
        return self._params.power

    @property
    def weight_transform(self) -> Optional[WeightTransform]:
        return self._params.weighted_function

    def __len__(self) -> int:
        return self.n_samples

    def __repr__(self) -> str:
        func = self._params.weighted_function
        func_name = None if func is None else getattr(func, "__name__", repr(func))
        return (
            f"IDW(n_samples={self.n_samples}, ndim={self._ndim}, "
            f"power={self._params.power!r}, weighted_function={func_name}, "
            f"dtype={self._dtype})"
        )

    # ------------------------------------------------------------------ #
    # Configuration (copy-on-write)
    # ------------------------------------------------------------------ #

    def _replace_params(self, **changes) -> "IDW":
        new = copy.copy(self)
        new._params = replace(self._params, **changes)
        logger.debug("Reconfigured IDW: %s", new._params)
        return new

    def with_params(self, params: IDWParams) -> "IDW":
        """Return a copy of this interpolator using ``params``."""
        return self._replace_params(
            power=params.power, weighted_function=params.weighted_function
        )

    def with_power(self, power: float) -> "IDW":
        """
        Return a copy of this interpolator with a new power parameter.

        The samples are shared, not copied.
        """
        return self._replace_params(power=power)

    def with_weight_transform(self, func: Optional[WeightTransform]) -> "IDW":
        """
        Return a copy of this interpolator with a weight transform.

        ``func`` maps one normalized weight to a new weight. The transformed
        weights are normalized again before blending, so ``func`` does not
        have to preserve a sum of 1. Pass ``None`` to go back to identity.
        """
        return self._replace_params(weighted_function=func)

    def power(self, power: float) -> "IDW":
        """Alias of :meth:`with_power`."""
        return self.with_power(power)

    def weighted_function(self, func: Optional[WeightTransform]) -> "IDW":
        """Alias of :meth:`with_weight_transform`."""
        return self.with_weight_transform(func)

    # ------------------------------------------------------------------ #
    # Evaluation
    # ------------------------------------------------------------------ #

    def _distances(self, position: Coordinate) -> np.ndarray:
        pos = as_position(position, self._ndim, self._dtype)
        # overflow in the squared components gives inf, not an error
        with np.errstate(all="ignore"):
            return self._distance(self._points, pos)

    def _blend_weights(self, distances: np.ndarray) -> np.ndarray:
        one = self._dtype.type(1)
        power = self._dtype.type(self._params.power)

        weights = normalize_weights(one / distances ** power)

        func = self._params.weighted_function
        if func is not None:
            weights = np.fromiter(
                (func(w) for w in weights), dtype=self._dtype, count=weights.size
            )
            weights = normalize_weights(weights)
        return weights

    def weights(self, position: Coordinate) -> np.ndarray:
        """
        Final blending weights for ``position``.

        On an exact match the result is one-hot at the first coincident
        sample. Otherwise it is the normalized (and, with a transform,
        renormalized) weight vector, which sums to 1.
        """
        distances = self._distances(position)
        with np.errstate(all="ignore"):
            index = _first_exact_match(distances)
            if index is not None:
                onehot = np.zeros(self.n_samples, dtype=self._dtype)
                onehot[index] = 1
                return onehot
            return self._blend_weights(distances)

    def evaluate(self, position: Coordinate):
        """
        Interpolated value at ``position``.

        Parameters
        ----------
        position : float or tuple of float
            Query coordinate with the same shape as the sample points.

        Returns
        -------
        numpy floating scalar
            Value of the first sample located exactly at ``position``, or the
            weighted blend of all sample values. Degenerate arithmetic yields
            NaN/Inf rather than an error.

        Raises
        ------
        ValueError
            If ``position`` does not have the sample dimension.
        """
        distances = self._distances(position)
        with np.errstate(all="ignore"):
            index = _first_exact_match(distances)
            if index is not None:
                return self._values[index]

            weights = self._blend_weights(distances)
            return np.dot(weights, self._values)

    __call__ = evaluate

    def evaluate_many(self, positions: Iterable[Coordinate]) -> np.ndarray:
        """
        Evaluate a sequence of positions, one :meth:`evaluate` call each.
        """
        return np.array([self.evaluate(p) for p in positions], dtype=self._dtype)


__all__ = [
    "IDW",
    "IDWParams",
    "DEFAULT_POWER",
    "SUPPORTED_DTYPES",
    "normalize_weights",
]
