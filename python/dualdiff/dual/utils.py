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


from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from dualdiff.dual.dual import (
    FLOATS,
    INTS,
    Dual,
    _acos,
    _asin,
    _atan,
    _cos,
    _div,
    _exp,
    _log,
    _notify_nan,
    _pow,
    _sin,
    _sqrt,
    _tan,
)
from dualdiff.enums.generics import NoInput
from dualdiff.errors import TE_GRADIENT_TYPE, VE_EVALUATE_NDIM

if TYPE_CHECKING:
    from dualdiff.typing import (  # pragma: no cover
        Arr1dF64,
        Callable,
        DualTypes,
        Number,
        Sequence,
    )


def variable(value: Number) -> Dual:
    """
    Create the differentiation variable, a :class:`Dual` with a derivative of 1.

    Parameters
    ----------
    value : float, int
        The point at which the derivative is to be evaluated.

    Returns
    -------
    Dual

    Examples
    --------
    .. ipython:: python

       from dualdiff import variable
       x = variable(5.0)
       y = x.pow(2.0).cos()
       y.value(), y.derivative()
    """
    return Dual(value, 1.0)


def constant(value: Number) -> Dual:
    """
    Create a literal :class:`Dual` with a derivative of 0.

    Parameters
    ----------
    value : float, int
        The constant value.

    Returns
    -------
    Dual
    """
    return Dual(value, 0.0)


def gradient(x: DualTypes) -> float:
    """
    Return the derivative of a dual number, or zero for a regular int or float.

    Parameters
    ----------
    x : int, float, Dual
        The value from which to extract the derivative.

    Returns
    -------
    float
    """
    if isinstance(x, Dual):
        return x.dual
    elif isinstance(x, FLOATS | INTS):
        return 0.0
    raise TypeError(TE_GRADIENT_TYPE.format(type(x)))


def evaluate(
    func: Callable[[Dual], DualTypes], x: Number | Sequence[Number] | Arr1dF64
) -> tuple[float, float] | tuple[Arr1dF64, Arr1dF64]:
    """
    Evaluate a function and its first derivative at one or more points.

    Parameters
    ----------
    func : Callable
        A function of a single argument composed of operations supported by :class:`Dual`.
    x : float, int, or 1-d array-like of float
        The point(s) at which to evaluate.

    Returns
    -------
    tuple of float, or tuple of 1-d ndarray

    Notes
    -----
    Each point is seeded with :func:`variable` and evaluated independently. A function that
    returns a plain number, and therefore does not depend on its argument, has a derivative of
    zero.

    Examples
    --------
    .. ipython:: python

       from dualdiff import evaluate
       evaluate(lambda x: x.pow(2.0).cos() + 3.0 * x, 2.0)
    """
    x_ = np.asarray(x, dtype=np.float64)
    if x_.ndim == 0:
        result = func(variable(float(x_)))
        return float(result), gradient(result)
    elif x_.ndim == 1:
        values = np.empty(x_.shape[0], dtype=np.float64)
        derivatives = np.empty(x_.shape[0], dtype=np.float64)
        for i, point in enumerate(x_):
            result = func(variable(float(point)))
            values[i], derivatives[i] = float(result), gradient(result)
        return values, derivatives
    raise ValueError(VE_EVALUATE_NDIM.format(x_.ndim))


def dual_exp(x: DualTypes) -> DualTypes:
    """
    Calculate the exponential value of a regular int or float or a dual number.

    Parameters
    ----------
    x : int, float, Dual
        Value to calculate exponent of.

    Returns
    -------
    float, Dual
    """
    if isinstance(x, Dual):
        return x.exp()
    return _exp(float(x))


def dual_log(x: DualTypes, base: Number | NoInput = NoInput(0)) -> DualTypes:
    """
    Calculate the logarithm of a regular int or float or a dual number.

    Parameters
    ----------
    x : int, float, Dual
        Value to calculate logarithm of.
    base : int, float, optional
        Base of the logarithm. Defaults to e to compute natural logarithm.

    Returns
    -------
    float, Dual

    Notes
    -----
    Non-positive values of ``x`` return NaN.
    """
    if isinstance(x, Dual):
        if isinstance(base, NoInput):
            return x.ln()
        return x.log(base)
    val = _log(float(x))
    if not math.isnan(x):
        _notify_nan("log", str(x), val, stacklevel=3)
    if isinstance(base, NoInput):
        return val
    return _div(val, _log(float(base)))


def dual_sqrt(x: DualTypes) -> DualTypes:
    """
    Calculate the square root of a regular int or float or a dual number.

    Negative values return NaN.
    """
    if isinstance(x, Dual):
        return x.sqrt()
    val = _sqrt(float(x))
    if not math.isnan(x):
        _notify_nan("sqrt", str(x), val, stacklevel=3)
    return val


def dual_pow(x: DualTypes, power: Number) -> DualTypes:
    """
    Raise a regular int or float or a dual number to a real power.

    Parameters
    ----------
    x : int, float, Dual
        The base.
    power : int, float
        The real exponent.

    Returns
    -------
    float, Dual
    """
    if isinstance(x, Dual):
        return x.pow(power)
    val = _pow(float(x), float(power))
    if not math.isnan(x):
        _notify_nan("pow", f"{x} ** {power}", val, stacklevel=3)
    return val


def dual_sin(x: DualTypes) -> DualTypes:
    """Calculate the sine of a regular int or float or a dual number."""
    if isinstance(x, Dual):
        return x.sin()
    return _sin(float(x))


def dual_cos(x: DualTypes) -> DualTypes:
    """Calculate the cosine of a regular int or float or a dual number."""
    if isinstance(x, Dual):
        return x.cos()
    return _cos(float(x))


def dual_tan(x: DualTypes) -> DualTypes:
    """Calculate the tangent of a regular int or float or a dual number."""
    if isinstance(x, Dual):
        return x.tan()
    return _tan(float(x))


def dual_asin(x: DualTypes) -> DualTypes:
    if isinstance(x, Dual):
        return x.asin()
    return _asin(float(x))


def dual_acos(x: DualTypes) -> DualTypes:
    if isinstance(x, Dual):
        return x.acos()
    return _acos(float(x))


def dual_atan(x: DualTypes) -> DualTypes:
    if isinstance(x, Dual):
        return x.atan()
    return _atan(float(x))
