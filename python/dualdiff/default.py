from __future__ import annotations

from copy import deepcopy
from typing import TYPE_CHECKING

from dualdiff.enums.generics import NoInput, _drb
from dualdiff.errors import VE_NAN_POLICY

if TYPE_CHECKING:
    from dualdiff.typing import Any  # pragma: no cover

DEFAULTS = dict(
    # Dual
    precision=1e-14,
    repr_digits=6,
    # Domain handling
    nan_policy="ignore",  # or "warn"
)


NAN_POLICIES = ("ignore", "warn")


class Defaults:
    """
    The *defaults* object used by dual number operations. Values are printed below:

    .. ipython:: python

       from dualdiff import defaults
       print(defaults.print())

    """

    _instance = None

    precision: float
    repr_digits: int
    nan_policy: str

    def __new__(cls) -> Defaults:
        if cls._instance is None:
            # Singleton pattern creates only one instance
            cls._instance = super(Defaults, cls).__new__(cls)  # noqa: UP008

            for k, v in DEFAULTS.items():
                setattr(cls._instance, k, deepcopy(v))

        return cls._instance

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "nan_policy" and value not in NAN_POLICIES:
            raise ValueError(VE_NAN_POLICY.format(value))
        super().__setattr__(name, value)

    def reset_defaults(self) -> None:
        """
        Revert defaults back to their initialisation status.

        Examples
        --------
        .. ipython:: python

           from dualdiff import defaults
           defaults.reset_defaults()
        """
        attrs = [
            v
            for v in dir(self)
            if "__" not in v and not callable(getattr(self, v)) and v != "_instance"
        ]
        for attr in attrs:
            delattr(self, attr)

        for k, v in DEFAULTS.items():
            setattr(self, k, deepcopy(v))

    def print(self) -> str:
        """
        Return a string representation of the current values in the defaults object.
        """

        def _t_n(v: str) -> str:  # tab-newline
            return f"\t{v}\n"

        _: str = f"""\
Dual:\n
{"".join([_t_n(f"{attribute}: {getattr(self, attribute)}") for attribute in ["precision", "repr_digits"]])}
Domain:\n
{"".join([_t_n(f"{attribute}: {getattr(self, attribute)}") for attribute in ["nan_policy"]])}
"""  # noqa: E501
        return _


__all__ = ["Defaults", "NoInput", "_drb"]
