"""Lark-based parser that reads selector text back into selector objects."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from objkit.errors import ParseError
from objkit.selectors.builder import AnySelector, CombinedSelector, Selector
from objkit.selectors.model import Category, Fragment

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a parse tree into a flat list of compounds and combinators.

    Compounds come out as lists of fragments; the selectors themselves are
    assembled afterwards so duplicate errors are not wrapped by Lark.
    """

    def element(self, items: list[Token]) -> Fragment:
        return Fragment(Category.ELEMENT, str(items[0]))

    def id_part(self, items: list[Token]) -> Fragment:
        return Fragment(Category.ID, str(items[0]))

    def class_part(self, items: list[Token]) -> Fragment:
        return Fragment(Category.CLASS, str(items[0]))

    def attr_part(self, items: list[Token]) -> Fragment:
        return Fragment(Category.ATTR, str(items[0]))

    def pseudo_class_part(self, items: list[Token]) -> Fragment:
        # name plus optional "(args)"
        return Fragment(Category.PSEUDO_CLASS, "".join(str(t) for t in items))

    def pseudo_element_part(self, items: list[Token]) -> Fragment:
        return Fragment(Category.PSEUDO_ELEMENT, str(items[0]))

    def compound(self, items: list[Fragment]) -> list[Fragment]:
        return list(items)

    def combinator(self, items: list[Token]) -> str:
        for token in items:
            if token.type == "COMBINATOR":
                return str(token)
        return " "

    def start(self, items: list[object]) -> list[object]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def _build_compound(fragments: list[Fragment]) -> Selector:
    selector = Selector()
    for fragment in fragments:
        selector = selector.add(fragment.category, fragment.value)
    return selector


def parse_selector(source: str) -> AnySelector:
    """Parse selector text such as ``div#main > a:hover``.

    Raises :class:`ParseError` on malformed text and
    :class:`DuplicateSelectorPartError` when a compound repeats an element,
    id or pseudo-element.
    """
    try:
        tree = _parser().parse(source.strip())
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e

    items = SelectorTransformer().transform(tree)
    result: AnySelector = _build_compound(items[0])
    for i in range(1, len(items), 2):
        result = CombinedSelector(
            left=result, combinator=items[i], right=_build_compound(items[i + 1])
        )
    logger.debug("Parsed selector %r -> %r", source, result.stringify())
    return result
