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

from enum import Enum
from typing import Any


class NoInput(Enum):
    """
    Enumerable type to handle setting default values.

    ``NoInput(0)`` (*blank*) indicates an argument that has not been given by the user and
    should be replaced by a default.
    """

    blank = 0


def _drb(default: Any, possible_ni: Any | NoInput) -> Any:
    """(D)efault (r)eplaces (b)lank"""
    return default if isinstance(possible_ni, NoInput) else possible_ni
