from __future__ import annotations

import logging
from json import loads
from typing import Any

from dualdiff.dual import Dual
from dualdiff.enums.generics import NoInput
from dualdiff.errors import VE_JSON_UNKNOWN_OBJECT

logger = logging.getLogger(__name__)

NAMES_Py: dict[str, Any] = {  # a mapping of native Python classes with a _from_json() method
    "Dual": Dual,
}


ENUMS_Py: dict[str, Any] = {
    "NoInput": NoInput,
}


def _pynative_from_json(name: str, json: dict[str, Any] | int) -> Any:
    if name in NAMES_Py:
        return NAMES_Py[name]._from_json(json)
    elif name in ENUMS_Py:
        return ENUMS_Py[name](json)
    logger.debug("Unknown PyNative object in JSON: %s", name)
    raise ValueError(VE_JSON_UNKNOWN_OBJECT.format(name))


def from_json(json: str) -> Any:
    """
    Create an object from JSON string.

    Parameters
    ----------
    json: str
        JSON string in appropriate format to construct the class.

    Returns
    -------
    Object
    """
    obj = loads(json)
    if isinstance(obj, dict) and "PyNative" in obj:
        # PyNative are objects constructed in Python and tagged with a serialization flag.
        class_name = next(iter(obj["PyNative"].keys()))
        return _pynative_from_json(name=class_name, json=obj["PyNative"][class_name])
    else:
        # object is a native Python element
        return obj
