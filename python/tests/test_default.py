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


import pytest
from dualdiff import __version__, default_context, defaults


def test_version() -> None:
    assert __version__ == "1.0.0"


def test_context_raises() -> None:
    with pytest.raises(ValueError, match="Need to invoke as "):
        default_context("only 1 arg")


def test_context_restores() -> None:
    with default_context("nan_policy", "warn", "precision", 1e-3):
        assert defaults.nan_policy == "warn"
        assert defaults.precision == 1e-3
    assert defaults.nan_policy == "ignore"
    assert defaults.precision == 1e-14


def test_context_as_decorator() -> None:
    @default_context("repr_digits", 2)
    def f():
        return defaults.repr_digits

    assert f() == 2
    assert defaults.repr_digits == 6


def test_reset_defaults() -> None:
    defaults.nan_policy = "warn"
    defaults.precision = 1e-6
    assert defaults.nan_policy == "warn"
    assert defaults.precision == 1e-6

    defaults.reset_defaults()
    assert defaults.nan_policy == "ignore"
    assert defaults.precision == 1e-14


def test_defaults_singleton() -> None:
    from dualdiff.default import Defaults

    other = Defaults()
    assert id(other) == id(defaults)


def test_defaults_print() -> None:
    result = defaults.print()
    assert "precision: 1e-14" in result
    assert "nan_policy: ignore" in result
    assert "repr_digits: 6" in result


def test_nan_policy_bad_value_raises() -> None:
    with pytest.raises(ValueError, match="`nan_policy` must be one of"):
        defaults.nan_policy = "bad"
    assert defaults.nan_policy == "ignore"


def test_context_bad_nan_policy_raises_and_restores() -> None:
    with pytest.raises(ValueError, match="`nan_policy` must be one of"):
        with default_context("precision", 1e-3, "nan_policy", "bad"):
            pass
    assert defaults.nan_policy == "ignore"
    assert defaults.precision == 1e-14
