"""CLI command: selectorkit build -- render a selector from fragments."""

from __future__ import annotations

import sys

import click

from selectorkit.cli.tokens import build_from_tokens
from selectorkit.errors import SelectorError


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE fragments, in order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.

    \b
    Example:
        selectorkit build element=a id=x class=c1 attr=href pseudo-class=hover
    """
    try:
        builder = build_from_tokens(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.render())
