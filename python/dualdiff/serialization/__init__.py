from dualdiff.serialization.json import from_json

__all__ = ["from_json"]
