# SPDX-License-Identifier: MIT
"""
idwpy.metrics
=============

Scores for interpolated values against observed ones: MAE, RMSE and R².

Pairs where either side is NaN are ignored. A score that cannot be
computed (no pairs left, constant observations) is ``nan``.
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np


def _observed_and_residuals(y_true, y_pred) -> Tuple[np.ndarray, np.ndarray]:
    """
    Observed values and ``y_pred - y_true`` over the NaN-free pairs.
    """
    obs = np.asarray(y_true, dtype="float64")
    pred = np.asarray(y_pred, dtype="float64")
    if obs.shape != pred.shape:
        raise ValueError(
            f"y_true and y_pred must have the same shape; got {obs.shape} and {pred.shape}."
        )
    ok = ~(np.isnan(obs) | np.isnan(pred))
    return obs[ok], pred[ok] - obs[ok]


def mae(y_true, y_pred) -> float:
    """Mean absolute error."""
    _, res = _observed_and_residuals(y_true, y_pred)
    return float(np.abs(res).mean()) if res.size else float("nan")


def rmse(y_true, y_pred) -> float:
    """Root-mean-square error."""
    _, res = _observed_and_residuals(y_true, y_pred)
    return float(np.sqrt(np.square(res).mean())) if res.size else float("nan")


def r2(y_true, y_pred) -> float:
    """
    Coefficient of determination. Needs at least two pairs and
    non-constant observations.
    """
    obs, res = _observed_and_residuals(y_true, y_pred)
    if obs.size < 2:
        return float("nan")
    spread = float(np.square(obs - obs.mean()).sum())
    if spread == 0.0:
        return float("nan")
    return 1.0 - float(np.square(res).sum()) / spread


def compute_metrics(y_true, y_pred) -> Dict[str, float]:
    """
    All scores at once, keyed "MAE", "RMSE" and "R2".
    """
    return {
        "MAE": mae(y_true, y_pred),
        "RMSE": rmse(y_true, y_pred),
        "R2": r2(y_true, y_pred),
    }


__all__ = [
    "mae",
    "rmse",
    "r2",
    "compute_metrics",
]
