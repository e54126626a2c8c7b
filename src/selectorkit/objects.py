"""Small helpers over plain dicts, lists and value objects.

Every function here is independent and side-effect free unless noted
(``sort_cities_array`` sorts in place).
"""

from __future__ import annotations

import json
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeVar

__all__ = [
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "make_immutable",
    "make_word",
    "sell_tickets",
    "Rectangle",
    "get_json",
    "from_json",
    "sort_cities_array",
    "group",
    "TICKET_PRICE",
]

T = TypeVar("T")

TICKET_PRICE = 25

# Change owed per accepted bill larger than the ticket price.
_CHANGE_DUE = {50: 25, 100: 75}


# ---------------------------------------------------------------------------
# Object helpers
# ---------------------------------------------------------------------------


def shallow_copy(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict sharing the values of *obj*."""
    return dict(obj)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def merge_objects(objects: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge dicts left to right, summing numeric values on shared keys.

    Only int and float values are summed (bools excluded); any other
    collision, Decimal included, keeps the later value.
    """
    merged: dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            if key in merged and _is_number(value) and _is_number(merged[key]):
                merged[key] += value
            else:
                merged[key] = value
    return merged


def remove_properties(obj: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a copy of *obj* without *keys*; missing keys are ignored."""
    drop = set(keys)
    return {key: value for key, value in obj.items() if key not in drop}


def compare_objects(obj1: Mapping[str, Any], obj2: Mapping[str, Any]) -> bool:
    """True if two flat dicts hold the same items in the same key order."""
    return list(obj1.items()) == list(obj2.items())


def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0


def make_immutable(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of a private copy of *obj*.

    Item assignment and deletion on the result raise ``TypeError``.
    """
    return MappingProxyType(dict(obj))


# ---------------------------------------------------------------------------
# Puzzles
# ---------------------------------------------------------------------------


def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """Build a word from a map of letter -> positions.

    >>> make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]})
    'aabbcc'
    """
    by_position: dict[int, str] = {}
    for letter, positions in letters.items():
        for position in positions:
            by_position[position] = letter
    return "".join(by_position[pos] for pos in sorted(by_position))


def sell_tickets(queue: Iterable[int]) -> bool:
    """Simulate a ticket seller who starts with no change.

    Tickets cost 25 and customers pay with 25, 50 or 100 bills, served
    strictly in order. Only 25 bills are kept for change, tracked as a
    running total. Returns False at the first customer who cannot be served
    or who pays with an unknown bill.
    """
    change = 0
    for bill in queue:
        if bill == TICKET_PRICE:
            change += TICKET_PRICE
            continue
        owed = _CHANGE_DUE.get(bill)
        if owed is None or change < owed:
            return False
        change -= owed
    return True


# ---------------------------------------------------------------------------
# Value objects and JSON
# ---------------------------------------------------------------------------


@dataclass
class Rectangle:
    """A width x height rectangle."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def get_json(obj: Any) -> str:
    """Serialize *obj* to compact JSON, e.g. ``{"height":10,"width":20}``.

    Non-ASCII text is written as-is rather than escaped.
    """
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def from_json(cls: type[T], json_text: str) -> T:
    """Create an instance of *cls* from a JSON object without calling ``__init__``.

    Each decoded key becomes an attribute on the new instance.
    """
    data = json.loads(json_text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    for key, value in data.items():
        setattr(instance, key, value)
    return instance


# ---------------------------------------------------------------------------
# Sorting and grouping
# ---------------------------------------------------------------------------


def sort_cities_array(arr: list[dict[str, str]]) -> list[dict[str, str]]:
    """Sort in place by country, then city, and return the same list.

    Names compare case-insensitively; exact spelling breaks ties.
    """
    arr.sort(
        key=lambda item: (
            item["country"].casefold(),
            item["country"],
            item["city"].casefold(),
            item["city"],
        )
    )
    return arr


def group(
    items: Iterable[T],
    key_selector: Callable[[T], Hashable],
    value_selector: Callable[[T], Any],
) -> dict[Hashable, list[Any]]:
    """Group *items* into a multimap, keeping keys in first-seen order."""
    multimap: dict[Hashable, list[Any]] = {}
    for item in items:
        multimap.setdefault(key_selector(item), []).append(value_selector(item))
    return multimap
