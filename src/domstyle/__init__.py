"""domstyle: recursive-descent parsers for HTML-like markup and CSS-like stylesheets."""

__version__ = "0.1.0"

from domstyle.config import ParserConfig  # noqa: E402
from domstyle.dom import parse_markup  # noqa: E402
from domstyle.parser.errors import ParseError  # noqa: E402
from domstyle.stylesheet import parse_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "ParserConfig",
    "ParseError",
    "parse_markup",
    "parse_stylesheet",
]
