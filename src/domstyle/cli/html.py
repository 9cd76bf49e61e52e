"""CLI command: domstyle html -- display a parsed document tree."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from domstyle.config import ParserConfig
from domstyle.dom import Element, parse_markup, render
from domstyle.parser.errors import ParseError


def _validate_root_tag(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value:
        raise click.BadParameter("must be a non-empty tag name")
    return value


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "--max-depth",
    default=ParserConfig.max_depth,
    show_default=True,
    type=click.IntRange(min=1),
    help="Maximum element nesting depth",
)
@click.option(
    "--root-tag",
    default=ParserConfig.root_tag,
    show_default=True,
    callback=_validate_root_tag,
    help="Tag used to wrap multiple top-level nodes",
)
def html(source: TextIO, max_depth: int, root_tag: str) -> None:
    """Parse a markup file (or - for stdin) and print its document tree."""
    config = ParserConfig(max_depth=max_depth, root_tag=root_tag)

    try:
        root = parse_markup(source.read(), config)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(render(root))
    elements = root.element_count() if isinstance(root, Element) else 0
    click.echo()
    click.echo(f"Elements: {elements}")
