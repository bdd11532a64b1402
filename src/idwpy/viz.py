# SPDX-License-Identifier: MIT
"""
idwpy.viz
=========

Plotting helpers for IDW interpolators.

- :func:`plot_interpolation_1d`: interpolated curve over the sample range,
  with the samples drawn on top.
- :func:`plot_interpolation_2d`: interpolated surface over the bounding box
  of the samples, with the samples drawn on top.

Both functions return the Axes they drew on. A new Figure is created only
when ``ax`` is None. Colors and rcParams are left to the caller.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .idw import IDW


# --------------------------------------------------------------------- #
# Internal helpers
# --------------------------------------------------------------------- #


def _ensure_ax(
    ax: Optional[Axes] = None,
    figsize: Tuple[float, float] = (8.0, 4.0),
) -> Tuple[Figure, Axes, bool]:
    """
    Create a new Figure/Axes if ``ax`` is None.

    Returns
    -------
    (fig, ax, created_flag)
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        return fig, ax, True
    return ax.figure, ax, False


def _padded_range(coords: np.ndarray, padding: float) -> Tuple[float, float]:
    lo = float(np.min(coords))
    hi = float(np.max(coords))
    span = hi - lo
    if span == 0.0:
        span = 1.0
    return lo - padding * span, hi + padding * span


def _require_dim(idw: IDW, ndim: int, func: str) -> None:
    if idw.ndim != ndim:
        raise ValueError(f"{func} needs a {ndim}D interpolator; got {idw.ndim}D.")


def _title(idw: IDW) -> str:
    title = f"IDW (power={idw.power_parameter:g})"
    if idw.weight_transform is not None:
        title += ", transformed weights"
    return title


# --------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------- #


def plot_interpolation_1d(
    idw: IDW,
    *,
    num: int = 200,
    padding: float = 0.1,
    ax: Optional[Axes] = None,
    figsize: Tuple[float, float] = (8.0, 4.0),
) -> Axes:
    """
    Plot a 1D interpolator as a curve.

    Parameters
    ----------
    idw : IDW
        1D interpolator.
    num : int, default 200
        Number of evaluation positions.
    padding : float, default 0.1
        Fraction of the sample range added on both sides.
    ax : Axes or None
        Target axes; created if None.

    Returns
    -------
    Axes
    """
    _require_dim(idw, 1, "plot_interpolation_1d")
    _, ax, _ = _ensure_ax(ax, figsize)

    lo, hi = _padded_range(idw.points, padding)
    xs = np.linspace(lo, hi, num)
    ys = idw.evaluate_many(xs)

    ax.plot(xs, ys, label="interpolated")
    ax.scatter(idw.points, idw.values, color="k", zorder=3, label="samples")
    ax.set_xlabel("x")
    ax.set_ylabel("value")
    ax.set_title(_title(idw))
    ax.legend(loc="best")
    return ax


def plot_interpolation_2d(
    idw: IDW,
    *,
    resolution: int = 100,
    padding: float = 0.1,
    cmap: str = "viridis",
    ax: Optional[Axes] = None,
    figsize: Tuple[float, float] = (6.0, 5.0),
) -> Axes:
    """
    Plot a 2D interpolator as a colored surface.

    Parameters
    ----------
    idw : IDW
        2D interpolator.
    resolution : int, default 100
        Grid size along each axis.
    padding : float, default 0.1
        Fraction of the bounding box added on every side.
    cmap : str, default "viridis"
        Colormap of the surface and the sample markers.
    ax : Axes or None
        Target axes; created if None. A colorbar is added only to a
        newly created figure.

    Returns
    -------
    Axes
    """
    _require_dim(idw, 2, "plot_interpolation_2d")
    fig, ax, created = _ensure_ax(ax, figsize)

    pts = idw.points
    x0, x1 = _padded_range(pts[:, 0], padding)
    y0, y1 = _padded_range(pts[:, 1], padding)
    gx, gy = np.meshgrid(
        np.linspace(x0, x1, resolution),
        np.linspace(y0, y1, resolution),
    )
    gz = idw.evaluate_many(np.column_stack([gx.ravel(), gy.ravel()])).reshape(gx.shape)

    vmin = float(np.nanmin(idw.values))
    vmax = float(np.nanmax(idw.values))
    mesh = ax.pcolormesh(gx, gy, gz, shading="auto", cmap=cmap, vmin=vmin, vmax=vmax)
    ax.scatter(
        pts[:, 0], pts[:, 1], c=idw.values, cmap=cmap, vmin=vmin, vmax=vmax,
        edgecolors="k", zorder=3,
    )
    if created:
        fig.colorbar(mesh, ax=ax, label="value")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(_title(idw))
    return ax


__all__ = [
    "plot_interpolation_1d",
    "plot_interpolation_2d",
]
