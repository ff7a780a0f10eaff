"""JSON conversion between plain data and objects of a given shape.

``serialize`` turns any structured value into compact JSON text.  Objects are
encoded through their own field mapping, in this order of preference:

    1. a ``to_json_dict()`` hook,
    2. the instance ``__dict__``,
    3. dataclass fields (for slotted dataclasses).

``deserialize`` parses JSON text and attaches the result to a *shape*: the
new object gets its methods from the shape's class and its fields from the
parsed document.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any, Protocol, TypeVar

from objkit.config import ObjkitConfig
from objkit.errors import ParseError

__all__ = ["JSONShape", "serialize", "parse_json", "deserialize"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ObjkitConfig()

T = TypeVar("T")


class JSONShape(Protocol):
    """A class that builds its own instances from a parsed JSON object."""

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> Any: ...


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` so they encode as ``null``."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _to_plain(obj: Any) -> Any:
    """``json.dumps`` fallback for objects the encoder does not know."""
    if isinstance(obj, type):
        raise TypeError(f"Class {obj.__name__} is not JSON serializable")
    hook = getattr(obj, "to_json_dict", None)
    if callable(hook):
        return _finite(hook())
    if hasattr(obj, "__dict__"):
        return _finite(dict(vars(obj)))
    if dataclasses.is_dataclass(obj):
        return _finite(
            {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
        )
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, config: ObjkitConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Key order follows each object's own enumeration order unless the config
    asks for sorted keys.
    """
    cfg = config or _DEFAULT_CONFIG
    return json.dumps(
        _finite(value),
        indent=cfg.json_indent,
        separators=cfg.json_separators,
        sort_keys=cfg.json_sort_keys,
        ensure_ascii=cfg.json_ensure_ascii,
        default=_to_plain,
    )


def parse_json(text: str | bytes) -> Any:
    """Parse JSON *text* into plain data, raising :class:`ParseError`."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", line=e.lineno, column=e.colno) from e


def _own_fields(data: Any) -> dict[str, Any]:
    """Own fields of a parsed document.

    Objects give their keys, arrays and strings give index fields ("0", "1",
    ...), and null, booleans and numbers give no fields at all.
    """
    if isinstance(data, dict):
        return data
    if isinstance(data, (list, str)):
        return {str(i): item for i, item in enumerate(data)}
    return {}


def deserialize(shape: type[T] | T, text: str | bytes) -> T:
    """Parse *text* and build an object of *shape* from it.

    *shape* is a class or an instance of one.  A class implementing
    :class:`JSONShape` converts the data itself; any other class gets an
    instance allocated without ``__init__`` whose fields are exactly the
    parsed document's own fields.

    Raises :class:`ParseError` if *text* is not valid JSON.
    """
    cls: type = shape if isinstance(shape, type) else type(shape)
    fields = _own_fields(parse_json(text))

    factory = getattr(cls, "from_json_dict", None)
    if callable(factory):
        logger.debug("Deserializing %s via from_json_dict", cls.__name__)
        return factory(fields)

    logger.debug("Deserializing %s with fields %s", cls.__name__, list(fields))
    obj = cls.__new__(cls)
    if hasattr(obj, "__dict__"):
        # plain field storage, so keys like "__class__" stay ordinary data
        vars(obj).update(fields)
    else:
        for key, value in fields.items():
            object.__setattr__(obj, key, value)
    return obj
