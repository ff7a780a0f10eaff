"""CLI command: objkit area -- print the area of a rectangle."""

from __future__ import annotations

import click

from objkit.model import Rectangle


@click.command()
@click.argument("width", type=click.FloatRange(min=0))
@click.argument("height", type=click.FloatRange(min=0))
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width=width, height=height)
    value = rect.area()
    click.echo(f"{value:g}")
