"""CLI command: domstyle demo -- parse built-in samples."""

from __future__ import annotations

import click

from domstyle.dom import parse_markup, render
from domstyle.stylesheet import parse_stylesheet

SAMPLE_MARKUP = """
<div>
  Hello world, this is a useful link:
  <a href="https://example.com" target="_blank">
    useful link
  </a>
</div>
"""

SAMPLE_STYLESHEET = """
h1, div.bar, #foo { padding: 10px; color: inherit; }
a { color: #aabbcc; }
"""


@click.command()
def demo() -> None:
    """Parse a sample document and stylesheet and print both trees."""
    click.echo(render(parse_markup(SAMPLE_MARKUP)))
    click.echo()
    for rule in parse_stylesheet(SAMPLE_STYLESHEET).rules:
        click.echo(str(rule))
