"""Fluent CSS selector builder, factory entry points, and combinator.

Example:
    from_element("a").id("x").class_("c1").attr("href").stringify()
    # -> 'a#x.c1[href]'

    combine(from_class("a"), ">", from_id("b")).stringify()
    # -> '.a > #b'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from selectorkit.errors import DuplicateFragmentError, OrderError
from selectorkit.model import SINGLETON_CATEGORIES, Category, SelectorParts

__all__ = [
    "SelectorBuilder",
    "CombinedSelector",
    "Renderable",
    "from_element",
    "from_id",
    "from_class",
    "from_attribute",
    "from_pseudo_class",
    "from_pseudo_element",
    "combine",
    "css_selector_builder",
]

logger = logging.getLogger("selectorkit")


class Renderable(Protocol):
    """Anything that can render itself as a selector string."""

    def render(self) -> str: ...


class SelectorBuilder:
    """Accumulates selector fragments and renders them in canonical order.

    Every append method returns the builder itself so calls can be chained.
    A rejected append raises and leaves the builder unchanged.
    """

    def __init__(self) -> None:
        self.parts = SelectorParts()
        self._last: Category | None = None

    # --- appends --------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def append(self, category: Category, value: str) -> SelectorBuilder:
        """Append *value* under an explicit *category*."""
        return self._append(Category(category), value)

    @property
    def last_category(self) -> Category | None:
        """The category of the most recently accepted fragment."""
        return self._last

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        if category in SINGLETON_CATEGORIES and self.parts.has(category):
            logger.debug("Rejected duplicate %s %r", category.label, value)
            raise DuplicateFragmentError(category)
        if self._last is not None and category < self._last:
            logger.debug(
                "Rejected %s %r after %s", category.label, value, self._last.label
            )
            raise OrderError(category, self._last)

        self.parts.store(category, value)
        self._last = category
        logger.debug("Appended %s %r", category.label, value)
        return self

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the selector string; an empty builder renders ``""``."""
        return self.parts.render()

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator. Render-only."""

    left: str
    combinator: str
    right: str

    def render(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def from_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def from_id(value: str) -> SelectorBuilder:
    return SelectorBuilder().id(value)


def from_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def from_attribute(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def from_pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def from_pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join two selectors with *combinator* (``>``, ``+``, ``~``, ...).

    The combinator is embedded verbatim between single spaces.
    """
    return CombinedSelector(
        left=left.render(), combinator=combinator, right=right.render()
    )


class _CssSelectorBuilder:
    """Namespace mirroring the chain vocabulary for starting a selector."""

    element = staticmethod(from_element)
    id = staticmethod(from_id)
    class_ = staticmethod(from_class)
    attr = staticmethod(from_attribute)
    pseudo_class = staticmethod(from_pseudo_class)
    pseudo_element = staticmethod(from_pseudo_element)
    combine = staticmethod(combine)


css_selector_builder = _CssSelectorBuilder()
