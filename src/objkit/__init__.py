"""objkit: object helpers, JSON conversion and a fluent CSS selector builder."""

from objkit.config import ObjkitConfig
from objkit.errors import DuplicateSelectorPartError, ObjkitError, ParseError
from objkit.model import Rectangle
from objkit.selectors import (
    CombinedSelector,
    Selector,
    SelectorBuilder,
    css_selector_builder,
    parse_selector,
)
from objkit.serialization import JSONShape, deserialize, serialize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "ObjkitConfig",
    # errors
    "ObjkitError",
    "ParseError",
    "DuplicateSelectorPartError",
    # model
    "Rectangle",
    # serialization
    "JSONShape",
    "serialize",
    "deserialize",
    # selectors
    "Selector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
    "parse_selector",
]
