"""Selector model: fragment categories and the parts of a selector."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Category(IntEnum):
    """Fragment categories, valued by their position in a selector.

    A selector must list its fragments in non-decreasing category order:
        element < id < class < attribute < pseudo-class < pseudo-element
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")


# Categories that may appear at most once per selector.
SINGLETON_CATEGORIES = frozenset({
    Category.ELEMENT,
    Category.ID,
    Category.PSEUDO_ELEMENT,
})


@dataclass
class SelectorParts:
    """Fragments accumulated by a selector under construction.

    ``None`` marks an unset element or id; an empty string counts as set.
    """

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_elements: list[str] = field(default_factory=list)

    def has(self, category: Category) -> bool:
        """True if at least one fragment of *category* has been stored."""
        if category is Category.ELEMENT:
            return self.element is not None
        if category is Category.ID:
            return self.id is not None
        return bool(self._sequence(category))

    def store(self, category: Category, value: str) -> None:
        """Record *value* under *category* without any checks."""
        if category is Category.ELEMENT:
            self.element = value
        elif category is Category.ID:
            self.id = value
        else:
            self._sequence(category).append(value)

    def render(self) -> str:
        """Concatenate all fragments in category order."""
        pieces: list[str] = []
        if self.element is not None:
            pieces.append(self.element)
        if self.id is not None:
            pieces.append(f"#{self.id}")
        pieces.extend(f".{name}" for name in self.classes)
        pieces.extend(f"[{attr}]" for attr in self.attributes)
        pieces.extend(f":{name}" for name in self.pseudo_classes)
        pieces.extend(f"::{name}" for name in self.pseudo_elements)
        return "".join(pieces)

    def _sequence(self, category: Category) -> list[str]:
        if category is Category.CLASS:
            return self.classes
        if category is Category.ATTRIBUTE:
            return self.attributes
        if category is Category.PSEUDO_CLASS:
            return self.pseudo_classes
        if category is Category.PSEUDO_ELEMENT:
            return self.pseudo_elements
        raise ValueError(f"Category {category.label!r} is not a sequence")
