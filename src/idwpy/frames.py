# SPDX-License-Identifier: MIT
"""
idwpy.frames
============

pandas adapters for the IDW interpolator.

- :func:`validate_required_columns`: fail early on missing columns.
- :func:`idw_from_frame`: build an :class:`~idwpy.idw.IDW` from a table of
  samples, one row per sample.
- :func:`interpolate_frame`: evaluate an interpolator at every row of a
  table of query positions.

Column names are parameters, so any long-format table works as long as the
caller says which columns hold the coordinates and the value.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .idw import DEFAULT_POWER, IDW, WeightTransform

logger = logging.getLogger(__name__)


def validate_required_columns(
    df: pd.DataFrame,
    required: Sequence[str],
    context: Optional[str] = None,
) -> None:
    """
    Raise a ValueError if any required columns are missing.

    Parameters
    ----------
    df : DataFrame
        Input table.
    required : sequence of str
        Column names that must be present.
    context : str or None, default None
        Optional string prepended to the error message (e.g. the calling
        function name).
    """
    missing = [c for c in required if c not in df.columns]
    if not missing:
        return

    prefix = f"[{context}] " if context else ""
    raise ValueError(
        f"{prefix}missing required columns {missing}. "
        f"Available columns include: {list(df.columns)[:12]}..."
    )


def _coords_from_frame(df: pd.DataFrame, coord_cols: Sequence[str]) -> np.ndarray:
    coords = df[list(coord_cols)].to_numpy(dtype="float64")
    if len(coord_cols) == 1:
        return coords[:, 0]
    return coords


def idw_from_frame(
    df: pd.DataFrame,
    *,
    coord_cols: Sequence[str],
    value_col: str,
    power: float = DEFAULT_POWER,
    weighted_function: Optional[WeightTransform] = None,
    dropna: bool = True,
    dtype=np.float64,
) -> IDW:
    """
    Build an interpolator from a sample table.

    Parameters
    ----------
    df : DataFrame
        One row per sample.
    coord_cols : sequence of str
        One, two or three coordinate columns (1D, 2D or 3D interpolation).
    value_col : str
        Column holding the sample values.
    power, weighted_function, dtype
        Forwarded to :class:`~idwpy.idw.IDW`.
    dropna : bool, default True
        Drop rows with a NaN in any of the used columns before building.

    Returns
    -------
    IDW

    Raises
    ------
    ValueError
        If columns are missing.
    ConfigurationError
        If no usable rows remain or the number of coordinate columns is not
        supported.
    """
    if isinstance(coord_cols, str):
        coord_cols = [coord_cols]
    cols = list(coord_cols) + [value_col]
    validate_required_columns(df, cols, context="idw_from_frame")

    work = df[cols]
    if dropna:
        n_before = len(work)
        work = work.dropna()
        if len(work) < n_before:
            logger.debug(
                "idw_from_frame: dropped %d rows with missing values.",
                n_before - len(work),
            )

    return IDW(
        _coords_from_frame(work, coord_cols),
        work[value_col].to_numpy(dtype="float64"),
        power=power,
        weighted_function=weighted_function,
        dtype=dtype,
    )


def interpolate_frame(
    idw: IDW,
    df: pd.DataFrame,
    *,
    coord_cols: Sequence[str],
    out_col: str = "idw",
    inplace: bool = False,
) -> pd.DataFrame:
    """
    Evaluate ``idw`` at the position of every row of ``df``.

    Parameters
    ----------
    idw : IDW
        Configured interpolator.
    df : DataFrame
        Table of query positions.
    coord_cols : sequence of str
        Coordinate columns; their number must equal ``idw.ndim``.
    out_col : str, default "idw"
        Name of the output column.
    inplace : bool, default False
        If True, add the column to ``df`` itself. Otherwise work on a copy.

    Returns
    -------
    DataFrame
        ``df`` (or its copy) with the interpolated values in ``out_col``.
    """
    if isinstance(coord_cols, str):
        coord_cols = [coord_cols]
    validate_required_columns(df, coord_cols, context="interpolate_frame")
    if len(coord_cols) != idw.ndim:
        raise ValueError(
            f"interpolate_frame: got {len(coord_cols)} coordinate columns "
            f"for a {idw.ndim}D interpolator."
        )

    out = df if inplace else df.copy()
    positions = _coords_from_frame(out, coord_cols)
    out[out_col] = idw.evaluate_many(positions)
    return out


__all__ = [
    "validate_required_columns",
    "idw_from_frame",
    "interpolate_frame",
]
