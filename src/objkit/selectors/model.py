"""Selector fragment model: categories and the text pieces they render."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Kind of a simple-selector fragment."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def unique(self) -> bool:
        """True if the category may appear at most once per simple selector."""
        return self in _UNIQUE

    @property
    def weight(self) -> int:
        return _WEIGHTS[self]

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_UNIQUE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTR: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}

# Specificity weights: ids dominate, then classes; everything else is 1 or 0.
_WEIGHTS: dict[Category, int] = {
    Category.ELEMENT: 1,
    Category.ID: 100,
    Category.CLASS: 10,
    Category.ATTR: 1,
    Category.PSEUDO_CLASS: 1,
    Category.PSEUDO_ELEMENT: 0,
}

# Standard CSS combinators. ' ' is the descendant combinator.
COMBINATORS = (" ", "+", "~", ">")


@dataclass(frozen=True)
class Fragment:
    """One textual piece of a selector, e.g. ``#main`` or ``.container``."""

    category: Category
    value: str

    @property
    def text(self) -> str:
        return self.category.render(self.value)

    def __str__(self) -> str:
        return self.text
