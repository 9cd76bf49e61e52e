"""CLI command: domstyle css -- display parsed stylesheet rules."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from domstyle.parser.errors import ParseError
from domstyle.stylesheet import parse_stylesheet


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
def css(source: TextIO) -> None:
    """Parse a stylesheet file (or - for stdin) and print its rules.

    Each rule prints on one line, followed by a rule/declaration summary.
    """
    try:
        stylesheet = parse_stylesheet(source.read())
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for rule in stylesheet.rules:
        click.echo(str(rule))

    declarations = sum(len(rule.declarations) for rule in stylesheet.rules)
    click.echo()
    click.echo(f"Rules: {len(stylesheet.rules)}  Declarations: {declarations}")
