__docformat__ = "restructuredtext"

# Let users know if they're missing any of our hard dependencies
_hard_dependencies = ("numpy",)

for _dependency in _hard_dependencies:
    try:
        __import__(_dependency)
    except ImportError as _e:  # pragma: no cover
        raise ImportError(f"`dualdiff` requires installation of {_dependency}: {_e}")

from dualdiff.default import Defaults, NoInput
from dualdiff.errors import VE_DEFAULT_CONTEXT_ARGS

defaults = Defaults()

from contextlib import ContextDecorator


class default_context(ContextDecorator):
    """
    Context manager to temporarily set options in the `with` statement context.

    You need to invoke as ``default_context(pat, val, [(pat, val), ...])``.

    Examples
    --------
    >>> with default_context("nan_policy", "warn", "precision", 1e-10):
    ...     pass
    """

    def __init__(self, *args) -> None:
        if len(args) % 2 != 0 or len(args) < 2:
            raise ValueError(VE_DEFAULT_CONTEXT_ARGS)

        self.ops = list(zip(args[::2], args[1::2]))

    def __enter__(self) -> None:
        self.undo = [(pat, getattr(defaults, pat, None)) for pat, _ in self.ops]

        try:
            for pat, val in self.ops:
                setattr(defaults, pat, val)
        except ValueError:
            self.__exit__()
            raise

    def __exit__(self, *args) -> None:
        if self.undo:
            for pat, val in self.undo:
                setattr(defaults, pat, val)


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
from dualdiff.serialization import from_json

__all__ = [
    "defaults",
    "default_context",
    "NoInput",
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
    "from_json",
]

__version__ = "1.0.0"
