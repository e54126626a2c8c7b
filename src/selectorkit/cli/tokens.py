"""Turn ``KIND=VALUE`` command-line tokens into a selector builder."""

from __future__ import annotations

import shlex
from collections.abc import Iterable

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.model import Category

# Token kinds accepted on the command line.
KINDS: dict[str, Category] = {category.label: category for category in Category}
KINDS["attr"] = Category.ATTRIBUTE


def parse_token(token: str) -> tuple[Category, str]:
    """Split ``kind=value`` at the first ``=``; the value may contain more."""
    kind, sep, value = token.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {token!r}")
    category = KINDS.get(kind.strip().lower())
    if category is None:
        choices = ", ".join(sorted(KINDS))
        raise click.BadParameter(f"unknown kind {kind!r} (choose from {choices})")
    return category, value


def build_from_tokens(tokens: Iterable[str]) -> SelectorBuilder:
    """Append every token in order; selector errors propagate."""
    parsed = [parse_token(token) for token in tokens]
    builder = SelectorBuilder()
    for category, value in parsed:
        builder.append(category, value)
    return builder


def split_fragments(text: str) -> list[str]:
    """Split like a POSIX shell; quote a whole fragment to keep spaces in it."""
    try:
        return shlex.split(text)
    except ValueError as exc:
        raise click.BadParameter(f"{exc} in {text!r}") from exc
