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

import json
import logging
import math
import warnings
from functools import partial
from typing import TYPE_CHECKING, Any

import numpy as np

from dualdiff import defaults
from dualdiff.enums.generics import NoInput, _drb
from dualdiff.errors import (
    AE_DUAL_IS_IMMUTABLE,
    TE_DUAL_COMPARE,
    TE_DUAL_OPERAND,
    TE_DUAL_POWER,
    UW_NAN_PRODUCED,
)

if TYPE_CHECKING:
    from dualdiff.typing import Number  # pragma: no cover

FLOATS = float | np.float16 | np.float32 | np.float64 | np.longdouble
INTS = int | np.int8 | np.int16 | np.int32 | np.int64

logger = logging.getLogger(__name__)


def _ufunc(func: np.ufunc, *args: float) -> float:
    """Evaluate a numpy ufunc on real scalars returning IEEE results without warnings."""
    with np.errstate(all="ignore"):
        return float(func(*args))


_div = partial(_ufunc, np.divide)
_sqrt = partial(_ufunc, np.sqrt)
_exp = partial(_ufunc, np.exp)
_sin = partial(_ufunc, np.sin)
_cos = partial(_ufunc, np.cos)
_tan = partial(_ufunc, np.tan)
_asin = partial(_ufunc, np.arcsin)
_acos = partial(_ufunc, np.arccos)
_atan = partial(_ufunc, np.arctan)
_power = partial(_ufunc, np.power)


def _log(x: float) -> float:
    """Natural logarithm on the real line: NaN for any non-positive input."""
    if x <= 0.0:
        return math.nan
    return _ufunc(np.log, x)


def _pow(x: float, n: float) -> float:
    """Real power: NaN for a zero base with a non-positive exponent."""
    if x == 0.0 and n <= 0.0:
        return math.nan
    return _power(x, n)


def _notify_nan(func: str, inputs: str, result: float, stacklevel: int) -> None:
    """Warn and log under ``defaults.nan_policy="warn"`` when an operation creates NaN."""
    if math.isnan(result) and defaults.nan_policy == "warn":
        text = UW_NAN_PRODUCED.format(func, inputs)
        warnings.warn(text, UserWarning, stacklevel=stacklevel)
        logger.info(text)


def _isclose(a: float, b: float, precision: float) -> bool:
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return math.isclose(a, b, abs_tol=precision)


class Dual:
    """
    Dual number data type to perform first derivative automatic differentiation.

    Parameters
    ----------
    real : float, int
        The real coefficient of the dual number, i.e. the primal value.
    dual : float, int, optional
        The first derivative of ``real`` with respect to the single differentiation variable.
        Defaults to 1.0, which seeds the differentiation variable itself. Use 0.0 for a constant.

    Attributes
    ----------
    real : float
    dual : float

    Notes
    -----
    Every arithmetic operation and elementary function returns a new *Dual* whose ``dual``
    coefficient is the derivative of the result by the chain rule. Instances are immutable.

    Only one differentiation variable is supported. Combining two *Duals* that were each seeded
    as the variable, with a ``dual`` of 1.0, gives the sum of both sensitivities, which is only
    meaningful if both represent the same variable. Managing this is the caller's responsibility.

    Domain violations, e.g. the square root of a negative number, return NaN and division by zero
    returns signed infinity or NaN. No exception is raised and these values propagate through
    subsequent operations as ordinary floats. With ``defaults.nan_policy="warn"`` every operation
    whose ``real`` becomes NaN from non-NaN inputs issues a *UserWarning*. A NaN ``dual`` alone,
    e.g. ``inf * 0`` in the product rule, is not reported.

    See Also
    --------
    variable : Seed the differentiation variable.
    constant : Seed a literal with zero sensitivity.
    """

    __slots__ = ("_real", "_dual")

    def __init__(self, real: Number, dual: Number | NoInput = NoInput(0)) -> None:
        object.__setattr__(self, "_real", float(real))
        object.__setattr__(self, "_dual", float(_drb(1.0, dual)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(AE_DUAL_IS_IMMUTABLE.format(name))

    def __delattr__(self, name: str) -> None:
        raise AttributeError(AE_DUAL_IS_IMMUTABLE.format(name))

    def __reduce__(self) -> tuple[type[Dual], tuple[float, float]]:
        return (Dual, (self._real, self._dual))

    @property
    def real(self) -> float:
        """The primal value."""
        return self._real

    @property
    def dual(self) -> float:
        """The first derivative with respect to the seeded variable."""
        return self._dual

    def value(self) -> float:
        """Return the primal value of the dual number."""
        return self._real

    def derivative(self) -> float:
        """Return the first derivative of the dual number."""
        return self._dual

    # Conversion and comparison

    def __float__(self) -> float:
        return self._real

    def __abs__(self) -> float:
        return abs(self._real)

    def __repr__(self) -> str:
        d = defaults.repr_digits
        return f"<Dual: {self._real:,.{d}f}, [{self._dual:,.{d}f}]>"

    def __str__(self) -> str:
        output = f" val = {self._real:.8f}\n"
        output += f"  dx = {self._dual:.6f}\n"
        return output

    def _real_of(self, argument: Any) -> float:
        if isinstance(argument, Dual):
            return argument._real
        elif isinstance(argument, FLOATS | INTS):
            return float(argument)
        raise TypeError(TE_DUAL_COMPARE.format(type(self).__name__, type(argument).__name__))

    def __eq__(self, argument: Any) -> bool:
        """Compare an argument with a Dual number for equality."""
        if not isinstance(argument, Dual):
            if isinstance(argument, NoInput):
                return False
            elif not isinstance(argument, FLOATS | INTS):
                raise TypeError(
                    TE_DUAL_COMPARE.format(type(self).__name__, type(argument).__name__)
                )
            argument = Dual(float(argument), 0.0)
        return self.__eq_coeffs__(argument, defaults.precision)

    def __eq_coeffs__(self, argument: Dual, precision: float) -> bool:
        """Compare the coefficients of two Dual numbers for equality."""
        return _isclose(self._real, argument._real, precision) and _isclose(
            self._dual, argument._dual, precision
        )

    def __lt__(self, argument: Any) -> bool:
        """Compare an argument by evaluating the size of the real."""
        return self._real < self._real_of(argument)

    def __le__(self, argument: Any) -> bool:
        return self._real <= self._real_of(argument)

    def __gt__(self, argument: Any) -> bool:
        """Compare an argument by evaluating the size of the real."""
        return self._real > self._real_of(argument)

    def __ge__(self, argument: Any) -> bool:
        return self._real >= self._real_of(argument)

    # Arithmetic

    @staticmethod
    def _promote(argument: Any) -> Dual:
        """Convert a real scalar operand into a constant Dual."""
        if isinstance(argument, Dual):
            return argument
        elif isinstance(argument, FLOATS | INTS):
            return Dual(float(argument), 0.0)
        raise TypeError(TE_DUAL_OPERAND.format(type(argument)))

    def __neg__(self) -> Dual:
        return Dual(-self._real, -self._dual)

    def __pos__(self) -> Dual:
        return self

    def __add__(self, argument: Any) -> Dual:
        if isinstance(argument, np.ndarray):
            return NotImplemented
        return self._add(self._promote(argument))

    def __radd__(self, argument: Any) -> Dual:
        return self._promote(argument)._add(self)

    def __sub__(self, argument: Any) -> Dual:
        if isinstance(argument, np.ndarray):
            return NotImplemented
        return self._sub(self._promote(argument))

    def __rsub__(self, argument: Any) -> Dual:
        return self._promote(argument)._sub(self)

    def __mul__(self, argument: Any) -> Dual:
        if isinstance(argument, np.ndarray):
            return NotImplemented
        return self._mul(self._promote(argument))

    def __rmul__(self, argument: Any) -> Dual:
        return self._promote(argument)._mul(self)

    def __truediv__(self, argument: Any) -> Dual:
        if isinstance(argument, np.ndarray):
            return NotImplemented
        return self._truediv(self._promote(argument))

    def __rtruediv__(self, argument: Any) -> Dual:
        return self._promote(argument)._truediv(self)

    def __pow__(self, power: Any) -> Dual:
        if isinstance(power, np.ndarray):
            return NotImplemented
        return self._real_pow(power)

    def __rpow__(self, base: Any) -> Dual:
        """Exponential with a constant base, :math:`c^x`."""
        if not isinstance(base, FLOATS | INTS):
            raise TypeError(TE_DUAL_OPERAND.format(type(base)))
        c = float(base)
        real = _pow(c, self._real)
        self._check("__rpow__", f"{c} ** {self._real}", real)
        return Dual(real, _log(c) * real * self._dual)

    # Binary rules on two Duals. Each is called directly from an operator method, which fixes the
    # warning stacklevel under ``nan_policy="warn"``.

    def _check_binary(self, func: str, symbol: str, other: Dual, result: float) -> None:
        if not (math.isnan(self._real) or math.isnan(other._real)):
            _notify_nan(func, f"{self._real} {symbol} {other._real}", result, stacklevel=5)

    def _add(self, other: Dual) -> Dual:
        real = self._real + other._real
        self._check_binary("__add__", "+", other, real)
        return Dual(real, self._dual + other._dual)

    def _sub(self, other: Dual) -> Dual:
        real = self._real - other._real
        self._check_binary("__sub__", "-", other, real)
        return Dual(real, self._dual - other._dual)

    def _mul(self, other: Dual) -> Dual:
        real = self._real * other._real
        self._check_binary("__mul__", "*", other, real)
        return Dual(real, self._dual * other._real + self._real * other._dual)

    def _truediv(self, other: Dual) -> Dual:
        x, dx, y, dy = self._real, self._dual, other._real, other._dual
        real = _div(x, y)
        self._check_binary("__truediv__", "/", other, real)
        return Dual(real, _div(dx * y - x * dy, y * y))

    # Elementary functions

    def _check(self, func: str, inputs: str, result: float, stacklevel: int = 4) -> None:
        if not math.isnan(self._real):
            _notify_nan(func, inputs, result, stacklevel=stacklevel)

    def pow(self, power: Number) -> Dual:
        """
        Raise the dual number to a real power, :math:`x^n`.

        Parameters
        ----------
        power : float, int
            The real exponent, :math:`n`.

        Returns
        -------
        Dual

        Notes
        -----
        The derivative is :math:`n x^{n-1} \\dot{x}`. A zero base with a non-positive exponent,
        or a negative base with a non-integer exponent, returns NaN.
        """
        return self._real_pow(power)

    def _real_pow(self, power: Any) -> Dual:
        if not isinstance(power, FLOATS | INTS):
            raise TypeError(TE_DUAL_POWER.format(type(power)))
        n, x = float(power), self._real
        if x == 0.0 and n <= 0.0:
            self._check("pow", f"{x} ** {n}", math.nan, stacklevel=5)
            return Dual(math.nan, math.nan)
        real = _pow(x, n)
        self._check("pow", f"{x} ** {n}", real, stacklevel=5)
        return Dual(real, n * _power(x, n - 1.0) * self._dual)

    def sqrt(self) -> Dual:
        """Return the square root, with derivative :math:`\\dot{x} / 2\\sqrt{x}`."""
        real = _sqrt(self._real)
        self._check("sqrt", str(self._real), real)
        return Dual(real, _div(self._dual, 2.0 * real))

    def exp(self) -> Dual:
        """Return the exponential, with derivative :math:`e^x \\dot{x}`."""
        real = _exp(self._real)
        self._check("exp", str(self._real), real)
        return Dual(real, real * self._dual)

    def ln(self) -> Dual:
        """Return the natural logarithm, with derivative :math:`\\dot{x} / x`."""
        real = _log(self._real)
        self._check("ln", str(self._real), real)
        if math.isnan(real):
            return Dual(math.nan, math.nan)
        return Dual(real, _div(self._dual, self._real))

    def log(self, base: Number) -> Dual:
        """
        Return the logarithm to a given base.

        Parameters
        ----------
        base : float, int
            Base of the logarithm.

        Returns
        -------
        Dual

        Notes
        -----
        The derivative is :math:`\\dot{x} / (x \\ln b)`. A non-positive ``x`` returns NaN.
        """
        ln_base = _log(float(base))
        ln_x = _log(self._real)
        self._check("log", f"{self._real}, base={base}", ln_x)
        if math.isnan(ln_x):
            return Dual(math.nan, math.nan)
        return Dual(_div(ln_x, ln_base), _div(self._dual, ln_base * self._real))

    def sin(self) -> Dual:
        """Return the sine, with derivative :math:`\\cos(x) \\dot{x}`."""
        real = _sin(self._real)
        self._check("sin", str(self._real), real)
        return Dual(real, _cos(self._real) * self._dual)

    def cos(self) -> Dual:
        """Return the cosine, with derivative :math:`-\\sin(x) \\dot{x}`."""
        real = _cos(self._real)
        self._check("cos", str(self._real), real)
        return Dual(real, -_sin(self._real) * self._dual)

    def tan(self) -> Dual:
        """Return the tangent, with derivative :math:`\\dot{x} / \\cos^2(x)`."""
        real = _tan(self._real)
        self._check("tan", str(self._real), real)
        c = _cos(self._real)
        return Dual(real, _div(self._dual, c * c))

    def asin(self) -> Dual:
        real = _asin(self._real)
        self._check("asin", str(self._real), real)
        return Dual(real, _div(self._dual, _sqrt(1.0 - self._real * self._real)))

    def acos(self) -> Dual:
        real = _acos(self._real)
        self._check("acos", str(self._real), real)
        return Dual(real, -_div(self._dual, _sqrt(1.0 - self._real * self._real)))

    def atan(self) -> Dual:
        real = _atan(self._real)
        self._check("atan", str(self._real), real)
        return Dual(real, _div(self._dual, 1.0 + self._real * self._real))

    # Serialization

    def to_json(self) -> str:
        """
        Serialize this object to JSON format.

        The object can be deserialized using the :meth:`~dualdiff.serialization.from_json` method.

        Returns
        -------
        str
        """
        obj = dict(PyNative=dict(Dual=dict(real=self._real, dual=self._dual)))
        return json.dumps(obj)

    @classmethod
    def _from_json(cls, loaded_json: dict[str, Any]) -> Dual:
        return Dual(real=loaded_json["real"], dual=loaded_json["dual"])
