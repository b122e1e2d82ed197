# This module is reserved only for typing purposes.
# It avoids all circular import by performing a TYPE_CHECKING check on any component.

from collections.abc import Callable as Callable
from collections.abc import Sequence as Sequence
from typing import Any as Any
from typing import TypeAlias

import numpy as np

from dualdiff.dual.dual import Dual as Dual
from dualdiff.enums.generics import NoInput as NoInput

Number: TypeAlias = "float | int | np.floating[Any] | np.integer[Any]"
DualTypes: TypeAlias = "Number | Dual"

Arr1dF64: TypeAlias = "np.ndarray[tuple[int], np.dtype[np.float64]]"
