"""CLI command: objkit selector -- parse and normalize a CSS selector."""

from __future__ import annotations

import sys

import click

from objkit.errors import DuplicateSelectorPartError, ParseError
from objkit.selectors import parse_selector


@click.command()
@click.argument("text")
def selector(text: str) -> None:
    """Parse a CSS selector and print its normalized form.

    Prints the selector text followed by its specificity and exits with
    code 1 if the selector is malformed.
    """
    try:
        parsed = parse_selector(text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except DuplicateSelectorPartError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    click.echo(parsed.stringify())
    click.echo(f"Specificity: {parsed.specificity}")
