from objkit.serialization.json_codec import (
    JSONShape,
    deserialize,
    parse_json,
    serialize,
)

__all__ = ["JSONShape", "serialize", "parse_json", "deserialize"]
