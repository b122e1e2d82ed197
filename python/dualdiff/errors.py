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


# Dual operations

TE_DUAL_OPERAND = "Dual operations defined between float, int or Dual, got: {0}"

TE_DUAL_POWER = (
    "Dual power defined only with a float or int exponent, got: {0}. A Dual exponent would "
    "require an exponential with a variable base, use `c ** x` with a constant base `c` instead."
)

TE_DUAL_COMPARE = "Cannot compare {0} with incompatible type: {1}"

AE_DUAL_IS_IMMUTABLE = (
    "The '{0}' attribute of a Dual is immutable. Create a new Dual from an operation instead."
)

# Defaults

VE_NAN_POLICY = "`nan_policy` must be one of {{'ignore', 'warn'}}, got: '{0}'."

VE_DEFAULT_CONTEXT_ARGS = "Need to invoke as default_context(pat, val, [(pat, val), ...])."

UW_NAN_PRODUCED = (
    "`{0}` produced NaN from the non-NaN input: {1}. The input is outside the real domain of "
    "the operation and NaN will propagate through subsequent operations."
)

# Serialization

VE_JSON_UNKNOWN_OBJECT = "The JSON object type '{0}' cannot be deserialized by dualdiff."

# Evaluation

TE_GRADIENT_TYPE = "Can call `gradient` only on dual-type variables or numbers, got: {0}"

VE_EVALUATE_NDIM = "`x` must be a scalar or a 1-d array of points, got an array of ndim: {0}."
