from __future__ import annotations

from dualdiff.dual.dual import Dual
from dualdiff.dual.utils import (
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

__all__ = [
    "Dual",
    "variable",
    "constant",
    "dual_exp",
    "dual_log",
    "dual_sqrt",
    "dual_pow",
    "dual_sin",
    "dual_cos",
    "dual_tan",
    "dual_asin",
    "dual_acos",
    "dual_atan",
    "gradient",
    "evaluate",
]
