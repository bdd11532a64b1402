# SPDX-License-Identifier: MIT
"""
scikit-learn compatible IDW regressor.

:class:`IDWRegressor` wraps :class:`idwpy.idw.IDW` in the estimator API, so
an IDW configuration can be used inside pipelines, ``cross_val_score`` or
``GridSearchCV`` (e.g. to search over ``power``).

Features are coordinates: ``X`` has 1, 2 or 3 columns (a 1D array is read
as a single column).
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.utils.validation import check_array, check_is_fitted, check_X_y

from .idw import DEFAULT_POWER, IDW, WeightTransform


def _as_2d(X) -> np.ndarray:
    X = np.asarray(X, dtype="float64")
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    return X


class IDWRegressor(RegressorMixin, BaseEstimator):
    """
    Inverse Distance Weighting as a scikit-learn regressor.

    Parameters
    ----------
    power : float, default 2.0
        Power parameter of the IDW weighting.
    weighted_function : callable or None, default None
        Optional transform applied to the normalized weights.

    Attributes
    ----------
    idw_ : IDW
        Interpolator built by :meth:`fit`.
    n_features_in_ : int
        Number of coordinate columns seen during fit.
    """

    def __init__(
        self,
        power: float = DEFAULT_POWER,
        weighted_function: Optional[WeightTransform] = None,
    ):
        self.power = power
        self.weighted_function = weighted_function

    def fit(self, X, y):
        X, y = check_X_y(_as_2d(X), y, y_numeric=True)
        self.n_features_in_ = X.shape[1]
        points = X[:, 0] if X.shape[1] == 1 else X
        self.idw_ = IDW(
            points,
            y,
            power=self.power,
            weighted_function=self.weighted_function,
        )
        return self

    def predict(self, X) -> np.ndarray:
        check_is_fitted(self, "idw_")
        X = check_array(_as_2d(X))
        if X.shape[1] != self.n_features_in_:
            raise ValueError(
                f"X has {X.shape[1]} features, but IDWRegressor was fitted "
                f"with {self.n_features_in_}."
            )
        positions = X[:, 0] if X.shape[1] == 1 else X
        return self.idw_.evaluate_many(positions)


__all__ = ["IDWRegressor"]
