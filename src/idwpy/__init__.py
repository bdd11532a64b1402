# SPDX-License-Identifier: MIT
"""
idwpy
=====

Inverse Distance Weighting (IDW) interpolation over 1D, 2D and 3D samples.

Given sample points ``p_i`` with values ``v_i``, the value at a query
position ``x`` is the blend ``sum_i w_i * v_i`` with weights proportional to
``1 / d(p_i, x) ** power``. A query that coincides exactly with a sample
returns that sample's value.

Quick example
-------------

>>> from idwpy import IDW
>>> idw = IDW([(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)], [1.0, 2.0, 3.0])
>>> float(idw.evaluate((2.0, 2.0)))
2.0
>>> tuned = idw.with_power(0.5).with_weight_transform(lambda w: w * w)

Core submodules
---------------

- :mod:`idwpy.coords`     – coordinate shapes and distances
- :mod:`idwpy.idw`        – the :class:`IDW` interpolator
- :mod:`idwpy.exceptions` – :class:`ConfigurationError`

Companion submodules
--------------------

- :mod:`idwpy.frames`   – build / evaluate interpolators from pandas tables
- :mod:`idwpy.metrics`  – MAE, RMSE, R2
- :mod:`idwpy.evaluate` – leave-one-out cross-validation and power sweeps
- :mod:`idwpy.models`   – scikit-learn :class:`IDWRegressor`
- :mod:`idwpy.viz`      – matplotlib plots of 1D curves and 2D surfaces
"""

from __future__ import annotations

import logging

# Core
from .coords import distance, coordinate_dim
from .exceptions import ConfigurationError
from .idw import IDW, IDWParams

# pandas adapters
from .frames import idw_from_frame, interpolate_frame

# Metrics / cross-validation
from .metrics import compute_metrics
from .evaluate import leave_one_out, power_sweep

# Estimator
from .models import IDWRegressor

# Visualization
from .viz import plot_interpolation_1d, plot_interpolation_2d

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "IDW",
    "IDWParams",
    "ConfigurationError",
    "distance",
    "coordinate_dim",
    # pandas
    "idw_from_frame",
    "interpolate_frame",
    # Evaluation
    "compute_metrics",
    "leave_one_out",
    "power_sweep",
    # Estimator
    "IDWRegressor",
    # Visualization
    "plot_interpolation_1d",
    "plot_interpolation_2d",
]


# Sync this with pyproject.toml if you bump the version
__version__ = "0.1.0"
