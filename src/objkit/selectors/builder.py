"""Fluent CSS selector builder.

Each complex selector is made of element, id, class, attribute, pseudo-class
and pseudo-element parts::

    element#id.class[attr]:pseudoClass::pseudoElement

Class, attribute and pseudo-class parts may repeat; element, id and
pseudo-element may occur once.  Parts are emitted in the order they were
added.  Selectors are combined with ``' '``, ``'+'``, ``'~'`` or ``'>'``.

Example::

    b = css_selector_builder
    b.combine(
        b.element("div").id("main"), "+", b.element("table").id("data")
    ).stringify()   # 'div#main + table#data'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from objkit.errors import DuplicateSelectorPartError
from objkit.selectors.model import COMBINATORS, Category, Fragment

__all__ = [
    "Selector",
    "CombinedSelector",
    "AnySelector",
    "SelectorBuilder",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selector:
    """A simple selector: an append-only sequence of fragments.

    Every chaining call returns a new ``Selector``; the receiver is left
    untouched, so a partial selector can be shared as a prefix.
    """

    fragments: tuple[Fragment, ...] = ()

    def add(self, category: Category, value: object) -> Selector:
        """Append a fragment of *category*, enforcing the uniqueness rule."""
        if category.unique and any(f.category is category for f in self.fragments):
            raise DuplicateSelectorPartError(category.value)
        fragment = Fragment(category=category, value=str(value))
        return replace(self, fragments=self.fragments + (fragment,))

    # --- fragments ------------------------------------------------------------

    def element(self, value: object) -> Selector:
        return self.add(Category.ELEMENT, value)

    def id(self, value: object) -> Selector:
        return self.add(Category.ID, value)

    def class_(self, value: object) -> Selector:
        return self.add(Category.CLASS, value)

    def attr(self, value: object) -> Selector:
        return self.add(Category.ATTR, value)

    def pseudo_class(self, value: object) -> Selector:
        return self.add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: object) -> Selector:
        return self.add(Category.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    @property
    def specificity(self) -> int:
        return sum(f.category.weight for f in self.fragments)

    def stringify(self) -> str:
        return "".join(f.text for f in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    Fragment calls keep chaining on the rightmost simple selector, so
    ``combine(a, ">", b).class_("x")`` renders as ``a > b.x``.
    """

    left: AnySelector
    combinator: str
    right: AnySelector

    def add(self, category: Category, value: object) -> CombinedSelector:
        return replace(self, right=self.right.add(category, value))

    # --- fragments ------------------------------------------------------------

    def element(self, value: object) -> CombinedSelector:
        return self.add(Category.ELEMENT, value)

    def id(self, value: object) -> CombinedSelector:
        return self.add(Category.ID, value)

    def class_(self, value: object) -> CombinedSelector:
        return self.add(Category.CLASS, value)

    def attr(self, value: object) -> CombinedSelector:
        return self.add(Category.ATTR, value)

    def pseudo_class(self, value: object) -> CombinedSelector:
        return self.add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: object) -> CombinedSelector:
        return self.add(Category.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    @property
    def specificity(self) -> int:
        return max(self.left.specificity, self.right.specificity)

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


AnySelector = Selector | CombinedSelector


class SelectorBuilder:
    """Facade whose entry points each start an independent selector."""

    def element(self, value: object) -> Selector:
        return Selector().element(value)

    def id(self, value: object) -> Selector:
        return Selector().id(value)

    def class_(self, value: object) -> Selector:
        return Selector().class_(value)

    def attr(self, value: object) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: object) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: object) -> Selector:
        return Selector().pseudo_element(value)

    def combine(
        self, left: AnySelector, combinator: str, right: AnySelector
    ) -> CombinedSelector:
        """Join *left* and *right*; any combinator text is accepted."""
        if combinator not in COMBINATORS:
            logger.warning("Non-standard combinator %r", combinator)
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = SelectorBuilder()
