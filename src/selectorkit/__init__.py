"""selectorkit -- fluent CSS selector builder and small object helpers."""

from selectorkit.builder import (
    CombinedSelector,
    SelectorBuilder,
    combine,
    css_selector_builder,
    from_attribute,
    from_class,
    from_element,
    from_id,
    from_pseudo_class,
    from_pseudo_element,
)
from selectorkit.errors import DuplicateFragmentError, OrderError, SelectorError
from selectorkit.model import Category, SelectorParts

__version__ = "0.1.0"

__all__ = [
    # builder
    "SelectorBuilder",
    "CombinedSelector",
    "from_element",
    "from_id",
    "from_class",
    "from_attribute",
    "from_pseudo_class",
    "from_pseudo_element",
    "combine",
    "css_selector_builder",
    # model
    "Category",
    "SelectorParts",
    # errors
    "SelectorError",
    "DuplicateFragmentError",
    "OrderError",
]
