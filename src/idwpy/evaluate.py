# SPDX-License-Identifier: MIT
"""
idwpy.evaluate
==============

Cross-validation of IDW configurations.

For every sample ``i`` we:

1. Build an interpolator from all the *other* samples, using the requested
   power and weight transform.
2. Predict the value at point ``i``.
3. Compare the prediction with the observed value.

The per-sample predictions are returned as a table, together with MAE, RMSE
and R² over all folds (see :mod:`idwpy.metrics`).

:func:`power_sweep` repeats the leave-one-out run for a list of power
parameters and ranks them by one metric, which is the usual way to pick a
power for a given data set.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .coords import Coordinate
from .exceptions import ConfigurationError
from .idw import IDW, IDWParams, WeightTransform
from .metrics import compute_metrics

logger = logging.getLogger(__name__)

ParamsLike = Union[IDWParams, Mapping[str, Any], None]

# metric name -> sort ascending?
_METRIC_ORDER = {"MAE": True, "RMSE": True, "R2": False}


# --------------------------------------------------------------------------- #
# Internal helpers
# --------------------------------------------------------------------------- #


def _coerce_params(params: ParamsLike) -> IDWParams:
    """
    Accept an IDWParams, a plain dict of its fields, or None (defaults).
    """
    if params is None:
        return IDWParams()
    if isinstance(params, IDWParams):
        return params
    if isinstance(params, Mapping):
        return IDWParams(**dict(params))
    raise TypeError(
        f"params must be IDWParams, a mapping or None; got {type(params).__name__}."
    )


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #


def leave_one_out(
    points: Sequence[Coordinate],
    values: Sequence[float],
    *,
    params: ParamsLike = None,
    dtype=np.float64,
) -> Tuple[Dict[str, float], pd.DataFrame]:
    """
    Leave-one-out cross-validation of an IDW configuration.

    Parameters
    ----------
    points, values : sequence
        Samples, as accepted by :class:`~idwpy.idw.IDW`.
    params : IDWParams, dict or None
        Power and weight transform to validate. Defaults to ``IDWParams()``.
    dtype : numpy float dtype, default numpy.float64
        Forwarded to every interpolator.

    Returns
    -------
    metrics : dict
        "MAE", "RMSE" and "R2" over all held-out samples.
    table : DataFrame
        Columns ``index``, ``observed``, ``predicted``, ``error``
        (``predicted - observed``), one row per sample.

    Raises
    ------
    ConfigurationError
        If the samples are invalid or fewer than two are given.
    """
    cfg = _coerce_params(params)
    full = IDW(points, values, dtype=dtype)
    n = full.n_samples
    if n < 2:
        raise ConfigurationError(
            f"leave_one_out needs at least 2 samples; got {n}."
        )

    predicted = np.empty(n, dtype=full.dtype)
    idx = np.arange(n)
    for i in range(n):
        keep = idx != i
        fold = IDW(
            full.points[keep],
            full.values[keep],
            power=cfg.power,
            weighted_function=cfg.weighted_function,
            dtype=full.dtype,
        )
        predicted[i] = fold.evaluate(full.points[i])

    observed = np.asarray(full.values)
    table = pd.DataFrame(
        {
            "index": idx,
            "observed": observed,
            "predicted": predicted,
            "error": predicted - observed,
        }
    )
    metrics = compute_metrics(observed, predicted)

    logger.debug(
        "leave_one_out: %d folds, power=%r -> RMSE=%.6g",
        n, cfg.power, metrics["RMSE"],
    )
    return metrics, table


def power_sweep(
    points: Sequence[Coordinate],
    values: Sequence[float],
    powers: Iterable[float],
    *,
    weighted_function: Optional[WeightTransform] = None,
    metric: str = "RMSE",
    dtype=np.float64,
) -> pd.DataFrame:
    """
    Rank power parameters by leave-one-out performance.

    Parameters
    ----------
    points, values : sequence
        Samples, as accepted by :class:`~idwpy.idw.IDW`.
    powers : iterable of float
        Candidate power parameters.
    weighted_function : callable or None
        Weight transform shared by all candidates.
    metric : {"MAE", "RMSE", "R2"}, default "RMSE"
        Ranking metric. MAE/RMSE sort ascending, R2 descending.

    Returns
    -------
    DataFrame
        Columns ``power``, ``MAE``, ``RMSE``, ``R2``; best candidate first.
    """
    key = metric.upper()
    if key not in _METRIC_ORDER:
        raise ValueError(
            f"Unsupported metric '{metric}'. Use one of {sorted(_METRIC_ORDER)}."
        )

    rows = []
    for p in powers:
        m, _ = leave_one_out(
            points,
            values,
            params=IDWParams(power=p, weighted_function=weighted_function),
            dtype=dtype,
        )
        rows.append({"power": p, **m})

    cols = ["power", "MAE", "RMSE", "R2"]
    if not rows:
        return pd.DataFrame(columns=cols)

    out = (
        pd.DataFrame(rows, columns=cols)
        .sort_values(key, ascending=_METRIC_ORDER[key], kind="mergesort")
        .reset_index(drop=True)
    )
    logger.info(
        "power_sweep: best power %r (%s=%.6g) out of %d candidates.",
        out.loc[0, "power"], key, out.loc[0, key], len(out),
    )
    return out


__all__ = [
    "leave_one_out",
    "power_sweep",
]
