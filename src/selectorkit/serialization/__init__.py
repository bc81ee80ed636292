from selectorkit.serialization.json_codec import from_json, get_json

__all__ = ["from_json", "get_json"]
