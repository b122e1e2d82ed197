# SPDX-License-Identifier: LicenseRef-Rateslib-Dual
#
# Copyright (c) 2026 Siffrorna Technology Limited
#
# Dual-licensed: Free Educational Licence or Paid Commercial Licence (commercial/professional use)
# Source-available, not open source.
#
# See LICENSE and https://rateslib.com/py/en/latest/i_licence.html for details,
# and/or contact info (at) rateslib (dot) com
####################################################################################################


import math

import numpy as np
import pytest
from dualdiff import default_context
from dualdiff.dual import (
    Dual,
    constant,
    dual_acos,
    dual_asin,
    dual_atan,
    dual_cos,
    dual_exp,
    dual_log,
    dual_pow,
    dual_sin,
    dual_sqrt,
    dual_tan,
    evaluate,
    gradient,
    variable,
)


@pytest.mark.parametrize(
    "x",
    [
        2,
        2.0,
        Dual(2, 0.0),
    ],
)
def test_log(x) -> None:
    result = dual_log(x)
    expected = math.log(2)
    assert abs(float(result) - expected) < 1e-14


def test_dual_log_base() -> None:
    result = dual_log(16, 2)
    assert abs(result - 4.0) < 1e-14

    result = dual_log(Dual(16, 0.0), 2)
    assert result == Dual(4, 0.0)


def test_dual_log_non_positive_float() -> None:
    assert math.isnan(dual_log(0.0))
    assert math.isnan(dual_log(-3.0, 10))


@pytest.mark.parametrize(
    "x",
    [
        2,
        Dual(2, 0.0),
    ],
)
def test_exp(x) -> None:
    result = dual_exp(x)
    expected = math.exp(2)
    assert abs(float(result) - expected) < 1e-14


@pytest.mark.parametrize(
    ("func", "method", "x"),
    [
        (dual_sin, "sin", 0.7),
        (dual_cos, "cos", 0.7),
        (dual_tan, "tan", 0.7),
        (dual_asin, "asin", 0.3),
        (dual_acos, "acos", 0.3),
        (dual_atan, "atan", 0.3),
        (dual_sqrt, "sqrt", 2.0),
        (dual_exp, "exp", 0.7),
        (dual_log, "ln", 0.7),
    ],
)
def test_dual_functions_dispatch(func, method, x) -> None:
    result = func(variable(x))
    assert result == getattr(variable(x), method)()

    result = func(x)
    assert isinstance(result, float)
    assert result == getattr(variable(x), method)().real


def test_dual_pow() -> None:
    assert dual_pow(variable(5.0), 2) == Dual(25.0, 10.0)
    assert dual_pow(3.0, 2) == 9.0
    assert math.isnan(dual_pow(0.0, -1.0))
    assert math.isnan(dual_pow(-8.0, 1.0 / 3.0))


def test_dual_sqrt_negative_float() -> None:
    assert math.isnan(dual_sqrt(-1.0))


def test_float_functions_nan_policy_warn() -> None:
    with default_context("nan_policy", "warn"):
        with pytest.warns(UserWarning, match="`sqrt` produced NaN"):
            dual_sqrt(-4.0)
        with pytest.warns(UserWarning, match="`log` produced NaN"):
            dual_log(-4.0)
        with pytest.warns(UserWarning, match="`pow` produced NaN"):
            dual_pow(0.0, 0.0)


def test_float_functions_nan_policy_warning_points_at_caller() -> None:
    with default_context("nan_policy", "warn"):
        with pytest.warns(UserWarning, match="`sqrt` produced NaN") as record:
            dual_sqrt(-4.0)
    assert record[0].filename == __file__


def test_gradient() -> None:
    assert gradient(variable(3.0).pow(2)) == 6.0
    assert gradient(constant(3.0)) == 0.0


@pytest.mark.parametrize("x", [2, 2.5, np.float64(1.0), np.int32(2)])
def test_gradient_on_float(x) -> None:
    assert gradient(x) == 0.0


def test_gradient_raises() -> None:
    msg = "Can call `gradient` only on dual-type variables or numbers, got: <class 'str'>"
    with pytest.raises(TypeError, match=msg):
        gradient("x")


def test_evaluate_scalar() -> None:
    value, derivative = evaluate(lambda x: x * x + 2.0, 3.0)
    assert value == 11.0
    assert derivative == 6.0
    assert isinstance(value, float)


def test_evaluate_canonical_function() -> None:
    value, derivative = evaluate(lambda x: x.pow(2.0).cos(), 5.0)
    assert abs(value - math.cos(25.0)) < 1e-14
    assert abs(derivative - -10.0 * math.sin(25.0)) < 1e-14


def test_evaluate_array() -> None:
    x = np.array([0.0, 1.0, 2.0, 3.0])
    values, derivatives = evaluate(lambda x: 2.0 * x.pow(3) - x, x)
    assert isinstance(values, np.ndarray)
    assert values.dtype == np.float64
    assert np.all(np.isclose(values, 2.0 * x**3 - x))
    assert np.all(np.isclose(derivatives, 6.0 * x**2 - 1.0))


def test_evaluate_list() -> None:
    values, derivatives = evaluate(dual_exp, [0.0, 1.0])
    assert np.all(np.isclose(values, np.exp([0.0, 1.0])))
    assert np.all(np.isclose(derivatives, np.exp([0.0, 1.0])))


def test_evaluate_constant_function() -> None:
    value, derivative = evaluate(lambda x: 4.0, 1.0)
    assert value == 4.0
    assert derivative == 0.0


def test_evaluate_nan_points() -> None:
    values, derivatives = evaluate(dual_sqrt, [-1.0, 4.0])
    assert math.isnan(values[0])
    assert math.isnan(derivatives[0])
    assert values[1] == 2.0
    assert derivatives[1] == 0.25


def test_evaluate_raises_on_2d() -> None:
    with pytest.raises(ValueError, match="1-d array of points"):
        evaluate(dual_exp, np.ones((2, 2)))
