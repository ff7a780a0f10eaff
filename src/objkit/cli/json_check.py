"""CLI command: objkit json-check -- validate and re-serialize JSON."""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import TextIO

import click

from objkit.config import ObjkitConfig
from objkit.errors import ParseError
from objkit.serialization import parse_json, serialize


@click.command("json-check")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=int, default=None, help="Indent width for output")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort object keys")
@click.pass_obj
def json_check(
    config: ObjkitConfig | None, source: TextIO, indent: int | None, sort_keys: bool
) -> None:
    """Read JSON from SOURCE (default stdin) and print it re-serialized."""
    config = replace(
        config or ObjkitConfig(), json_indent=indent, json_sort_keys=sort_keys
    )
    try:
        data = parse_json(source.read())
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(serialize(data, config))
