# SPDX-License-Identifier: MIT
"""
Tests for idwpy.idw.IDW.

These tests focus on:
- construction-time validation for 1D, 2D and 3D samples,
- the exact-match short-circuit (including the first-match tie-break),
- reference values for several powers and a weight transform,
- weight normalization and copy-on-write reconfiguration.
"""

from __future__ import annotations

import math
import warnings
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from idwpy import IDW, ConfigurationError, IDWParams


def _sine_transform(weight):
    return (1.0 + math.sin(4.0 * math.pi * weight)) * 0.5


def _identity(weight):
    return weight


POINTS_1D = [1.0, 2.0, 3.0]
POINTS_2D = [(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]
POINTS_3D = [(1.0, 1.0, 1.0), (2.0, 2.0, 2.0), (3.0, 3.0, 3.0)]
VALUES = [1.0, 2.0, 3.0]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "points, values",
    [
        # empty points
        ([], [1.0, 2.0]),
        ([], [1.0]),
        # empty values
        ([1.0, 2.0], []),
        ([(1.0, 1.0), (2.0, 2.0)], []),
        ([(1.0, 1.0, 1.0), (2.0, 2.0, 2.0)], []),
        # different length
        ([1.0, 2.0], [1.0]),
        ([(1.0, 1.0), (2.0, 2.0)], [1.0]),
        ([(1.0, 1.0, 1.0), (2.0, 2.0, 2.0)], [1.0, 2.0, 3.0]),
    ],
)
def test_invalid_samples_raise(points, values):
    with pytest.raises(ConfigurationError):
        IDW(points, values)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        IDW([1.0, 2.0], [1.0])


def test_unsupported_shapes_and_dtypes_raise():
    with pytest.raises(ConfigurationError):
        IDW([(1.0, 2.0, 3.0, 4.0)], [1.0])
    with pytest.raises(ConfigurationError):
        IDW([(1.0, 2.0), (1.0, 2.0, 3.0)], [1.0, 2.0])
    with pytest.raises(ConfigurationError):
        IDW(["a", "b"], [1.0, 2.0])
    with pytest.raises(ConfigurationError):
        IDW(1.0, [1.0])
    with pytest.raises(ConfigurationError):
        IDW([1.0, 2.0], [1.0, 2.0], dtype=np.int32)


def test_dimension_is_inferred_from_points():
    assert IDW(POINTS_1D, VALUES).ndim == 1
    assert IDW(POINTS_2D, VALUES).ndim == 2
    assert IDW(POINTS_3D, VALUES).ndim == 3

    column = IDW(np.array(POINTS_1D).reshape(-1, 1), VALUES)
    assert column.ndim == 1
    assert column.points.shape == (3,)


def test_samples_are_copied_and_read_only():
    points = [1.0, 2.0, 3.0]
    values = np.array([1.0, 2.0, 3.0])
    idw = IDW(points, values)

    points[0] = 100.0
    values[0] = 100.0
    assert idw.evaluate(1.0) == 1.0

    with pytest.raises(ValueError):
        idw.points[0] = 5.0
    with pytest.raises(ValueError):
        idw.values[0] = 5.0


def test_single_sample():
    idw = IDW([(0.0, 0.0)], [4.0])
    assert len(idw) == 1
    assert idw.evaluate((0.0, 0.0)) == 4.0
    assert idw.evaluate((10.0, -3.0)) == pytest.approx(4.0)


# ---------------------------------------------------------------------------
# Reference values
# ---------------------------------------------------------------------------


def test_idw_1d():
    idw = IDW(POINTS_1D, VALUES)

    assert idw.evaluate(0.0) == pytest.approx(1.346938, rel=1e-6)
    assert idw.evaluate(1.0) == 1.0
    assert idw.evaluate(1.001) == pytest.approx(1.000001, rel=1e-6)
    assert idw.evaluate(1.5) == pytest.approx(1.578947, rel=1e-6)
    assert idw.evaluate(2.0) == 2.0
    assert idw.evaluate(2.5) == pytest.approx(2.421053, rel=1e-6)
    assert idw.evaluate(3.0) == 3.0
    assert idw.evaluate(4.0) == pytest.approx(2.653061, rel=1e-6)


def test_power():
    idw = IDW(POINTS_1D, VALUES).power(0.5)

    assert idw.evaluate(0.0) == pytest.approx(1.814988, rel=1e-6)
    assert idw.evaluate(1.0) == 1.0
    assert idw.evaluate(1.001) == pytest.approx(1.072458, rel=1e-6)
    assert idw.evaluate(1.5) == pytest.approx(1.836013, rel=1e-6)
    assert idw.evaluate(2.0) == 2.0
    assert idw.evaluate(2.5) == pytest.approx(2.163986, rel=1e-6)
    assert idw.evaluate(3.0) == 3.0
    assert idw.evaluate(4.0) == pytest.approx(2.185011, rel=1e-6)


def test_zero_and_negative_power():
    # power 0: plain mean of the values
    flat = IDW(POINTS_1D, VALUES, power=0.0)
    assert flat.evaluate(0.0) == pytest.approx(2.0)
    assert flat.evaluate(17.0) == pytest.approx(2.0)

    # power -1: weights grow with distance, d = 1, 2, 3 from x = 0
    inverted = IDW(POINTS_1D, VALUES, power=-1.0)
    assert inverted.evaluate(0.0) == pytest.approx(14.0 / 6.0)


def test_weighted_function():
    idw = IDW(POINTS_1D, VALUES).weighted_function(_sine_transform)

    assert idw.evaluate(0.0) == pytest.approx(2.138717, rel=1e-6)
    assert idw.evaluate(1.0) == 1.0
    assert idw.evaluate(1.001) == pytest.approx(2.000006, rel=1e-6)
    assert idw.evaluate(1.5) == pytest.approx(2.316685, rel=1e-6)
    assert idw.evaluate(2.0) == 2.0
    assert idw.evaluate(2.5) == pytest.approx(1.683314, rel=1e-6)
    assert idw.evaluate(3.0) == 3.0
    assert idw.evaluate(4.0) == pytest.approx(1.861282, rel=1e-6)


def test_idw_2d():
    idw = IDW(POINTS_2D, VALUES)

    assert idw.evaluate((0.0, 0.0)) == pytest.approx(1.346938, rel=1e-6)
    assert idw.evaluate((1.0, 2.0)) == pytest.approx(1.636363, rel=1e-6)
    assert idw.evaluate((1.001, 0.009)) == pytest.approx(1.274519, rel=1e-6)
    assert idw.evaluate((1.5, 2.5)) == pytest.approx(2.0, abs=1e-9)
    assert idw.evaluate((2.0, 2.0)) == 2.0
    assert idw.evaluate((2.5, 1.5)) == pytest.approx(2.0, abs=1e-9)
    assert idw.evaluate((3.0, 2.0)) == pytest.approx(2.363636, rel=1e-6)
    assert idw.evaluate((4.0, 4.0)) == pytest.approx(2.653061, rel=1e-6)


def test_idw_3d():
    idw = IDW(POINTS_3D, VALUES)

    assert idw.evaluate((0.0, 0.0, 0.0)) == pytest.approx(1.346938, rel=1e-6)
    assert idw.evaluate((1.0, 2.0, 3.0)) == pytest.approx(2.0, abs=1e-9)
    assert idw.evaluate((1.001, 0.009, 1.0)) == pytest.approx(1.229539, rel=1e-6)
    assert idw.evaluate((1.5, 2.5, 1.5)) == pytest.approx(1.919732, rel=1e-6)
    assert idw.evaluate((2.0, 2.0, 2.0)) == 2.0
    assert idw.evaluate((2.5, 1.5, 2.5)) == pytest.approx(2.080267, rel=1e-6)
    assert idw.evaluate((3.0, 2.0, 1.0)) == pytest.approx(2.0, abs=1e-9)
    assert idw.evaluate((4.0, 4.0, 4.0)) == pytest.approx(2.653061, rel=1e-6)


@pytest.mark.parametrize(
    "points, queries",
    [
        (POINTS_1D, [0.0, 1.5, 2.5, 4.0]),
        (POINTS_2D, [(0.0, 0.0), (1.5, 2.5), (1.0, 2.0), (4.0, 4.0)]),
        (POINTS_3D, [(0.0, 0.0, 0.0), (1.0, 2.0, 3.0), (1.5, 2.5, 1.5)]),
    ],
)
@pytest.mark.parametrize("power", [2.0, 0.5])
def test_identity_transform_matches_no_transform(points, queries, power):
    plain = IDW(points, VALUES, power=power)
    identity = plain.with_weight_transform(_identity)

    for q in queries:
        assert identity.evaluate(q) == pytest.approx(plain.evaluate(q), rel=1e-12)


# ---------------------------------------------------------------------------
# Exact-match short-circuit
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("points", [POINTS_1D, POINTS_2D, POINTS_3D])
@pytest.mark.parametrize("power", [-2.0, 0.0, 0.5, 2.0, 7.0])
@pytest.mark.parametrize("transform", [None, _identity, _sine_transform])
def test_exact_match_returns_sample_value(points, power, transform):
    values = [10.5, -3.25, 7.0]
    idw = IDW(points, values, power=power, weighted_function=transform)
    for p, v in zip(points, values):
        assert idw.evaluate(p) == v


def test_exact_match_first_sample_wins():
    idw = IDW([1.0, 1.0, 2.0], [5.0, 7.0, 9.0])
    assert idw.evaluate(1.0) == 5.0

    idw2 = IDW([(0.0, 0.0), (1.0, 1.0), (1.0, 1.0)], [5.0, 7.0, 9.0])
    assert idw2.evaluate((1.0, 1.0)) == 7.0


def test_near_match_is_blended():
    idw = IDW(POINTS_1D, VALUES)
    assert idw.evaluate(1.0 + 1e-6) != 1.0
    assert idw.weights(1.0 + 1e-6)[1] > 0.0


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("power", [-1.0, 0.0, 0.5, 2.0, 5.0])
@pytest.mark.parametrize(
    "transform", [None, _identity, _sine_transform, lambda w: w * w + 0.1]
)
def test_weights_sum_to_one(power, transform):
    idw = IDW(POINTS_2D, VALUES, power=power, weighted_function=transform)
    for q in [(0.0, 0.0), (1.5, 2.5), (3.3, -1.2), (10.0, 10.0)]:
        w = idw.weights(q)
        assert w.shape == (3,)
        assert np.isclose(w.sum(), 1.0)
        assert idw.evaluate(q) == pytest.approx(float(np.dot(w, VALUES)))


def test_weights_one_hot_on_exact_match():
    idw = IDW([1.0, 1.0, 2.0], [5.0, 7.0, 9.0])
    assert np.array_equal(idw.weights(1.0), [1.0, 0.0, 0.0])


def test_weights_favor_nearest_sample():
    idw = IDW(POINTS_1D, VALUES)
    w = idw.weights(1.2)
    assert np.argmax(w) == 0
    # d = 0.2, 0.8, 1.8 -> raw weights 25, 1.5625, 0.3086...
    assert w[0] == pytest.approx(25.0 / (25.0 + 1.5625 + 1.0 / 3.24))


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def test_reconfiguration_is_copy_on_write():
    base = IDW(POINTS_1D, VALUES)
    tuned = base.with_power(0.5).with_weight_transform(_sine_transform)

    assert base.power_parameter == 2.0
    assert base.weight_transform is None
    assert tuned.power_parameter == 0.5
    assert tuned.weight_transform is _sine_transform
    assert tuned.points is base.points
    assert tuned.values is base.values

    assert base.evaluate(0.0) == pytest.approx(1.346938, rel=1e-6)
    assert tuned.with_weight_transform(None).evaluate(0.0) == pytest.approx(1.814988, rel=1e-6)


def test_params_round_trip():
    idw = IDW(POINTS_1D, VALUES, power=3.0, weighted_function=_identity)
    assert idw.params == IDWParams(power=3.0, weighted_function=_identity)

    other = IDW(POINTS_1D, VALUES).with_params(idw.params)
    assert other.evaluate(0.0) == idw.evaluate(0.0)


def test_repr_mentions_configuration():
    text = repr(IDW(POINTS_2D, VALUES).with_weight_transform(_sine_transform))
    assert "n_samples=3" in text
    assert "ndim=2" in text
    assert "_sine_transform" in text


# ---------------------------------------------------------------------------
# Evaluation details
# ---------------------------------------------------------------------------


def test_position_shape_must_match():
    idw = IDW(POINTS_2D, VALUES)
    with pytest.raises(ValueError):
        idw.evaluate(1.0)
    with pytest.raises(ValueError):
        idw.evaluate((1.0, 2.0, 3.0))


def test_nan_propagates():
    idw = IDW(POINTS_1D, VALUES)
    assert np.isnan(idw.evaluate(float("nan")))


def test_degenerate_numerics_give_nan_without_warnings():
    # squared components overflow to inf -> all raw weights are 0
    huge = IDW([(1e200, 1e200), (0.0, 0.0)], [1.0, 3.0])
    # transformed weights sum to 0
    zeroed = IDW(POINTS_1D, VALUES).with_weight_transform(lambda w: 0.0)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert np.isnan(huge.evaluate((-1e200, -1e200)))
        assert np.isnan(huge.weights((-1e200, -1e200))).all()
        assert np.isnan(zeroed.evaluate(0.0))
        assert np.isnan(zeroed.weights(0.0)).all()

        # wrong shapes are still rejected
        with pytest.raises(ValueError):
            huge.evaluate(1.0)


def test_float32_arithmetic():
    idw = IDW(POINTS_1D, VALUES, dtype=np.float32)
    out = idw.evaluate(0.0)
    assert out.dtype == np.float32
    assert float(out) == pytest.approx(1.346938, rel=1e-5)
    assert idw.evaluate_many([0.0, 2.0]).dtype == np.float32


def test_evaluate_many_and_call():
    idw = IDW(POINTS_2D, VALUES)
    queries = [(0.0, 0.0), (2.0, 2.0), (4.0, 4.0)]
    out = idw.evaluate_many(queries)
    assert out.shape == (3,)
    assert np.allclose(out, [idw(q) for q in queries])
    assert out[1] == 2.0


def test_concurrent_evaluation_is_consistent():
    idw = IDW(POINTS_3D, VALUES).with_weight_transform(_sine_transform)
    queries = [(0.1 * i, 0.2 * i, 0.05 * i) for i in range(200)]
    expected = [idw.evaluate(q) for q in queries]

    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(idw.evaluate, queries))

    assert got == expected
