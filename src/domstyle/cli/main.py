"""domstyle CLI entry point: Click group with subcommands."""

import logging

import click

from domstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="domstyle")
@click.option("-v", "--verbose", is_flag=True, help="Log parser activity to stderr")
def cli(verbose: bool) -> None:
    """domstyle - parse HTML-like markup and CSS-like stylesheets into trees."""
    if verbose:
        _enable_debug_logging()


def _enable_debug_logging() -> None:
    """Send the package's debug records to stderr."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger = logging.getLogger("domstyle")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)


# Import and register subcommands
from domstyle.cli.html import html  # noqa: E402
from domstyle.cli.css import css  # noqa: E402
from domstyle.cli.demo import demo  # noqa: E402

cli.add_command(html)
cli.add_command(css)
cli.add_command(demo)
