"""CLI command: selectorkit combine -- join two selectors with a combinator."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import combine as combine_selectors
from selectorkit.cli.tokens import build_from_tokens, split_fragments
from selectorkit.errors import SelectorError


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two selectors with COMBINATOR.

    LEFT and RIGHT are space-separated KIND=VALUE fragments, split with shell
    quoting rules, so a quoted fragment may contain spaces.

    \b
    Example:
        selectorkit combine "element=ul class=nav" ">" "element=li"
        selectorkit combine "element=a 'attr=title=\"a b\"'" ">" "element=span"
    """
    try:
        left_selector = build_from_tokens(split_fragments(left))
        right_selector = build_from_tokens(split_fragments(right))
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(combine_selectors(left_selector, combinator, right_selector).render())
