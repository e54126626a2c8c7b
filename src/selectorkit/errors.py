"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model import Category

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selectorkit usage errors."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is set a second time."""

    def __init__(self, category: Category) -> None:
        super().__init__(DUPLICATE_MESSAGE, category=category)


class OrderError(SelectorError):
    """Raised when a fragment is appended after a later category."""

    def __init__(self, category: Category, previous: Category) -> None:
        super().__init__(ORDER_MESSAGE, category=category)
        self.previous = previous
