from objkit.selectors.builder import (
    AnySelector,
    CombinedSelector,
    Selector,
    SelectorBuilder,
    css_selector_builder,
)
from objkit.selectors.model import COMBINATORS, Category, Fragment
from objkit.selectors.parser import parse_selector

__all__ = [
    "AnySelector",
    "Category",
    "COMBINATORS",
    "CombinedSelector",
    "Fragment",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "parse_selector",
]
