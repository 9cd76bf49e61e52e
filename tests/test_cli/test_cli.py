"""Tests for the domstyle CLI commands."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from domstyle import __version__
from domstyle.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def domstyle_logger():
    """Restore the package logger after a command reconfigures it."""
    logger = logging.getLogger("domstyle")
    handlers, level = logger.handlers[:], logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse HTML-like markup" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "html" in result.output
        assert "css" in result.output
        assert "demo" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# html command
# ---------------------------------------------------------------------------


class TestHtmlCommand:
    def test_renders_fixture(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", str(FIXTURES / "link.html")])
        assert result.exit_code == 0
        assert '<a href="https://example.com" target="_blank">' in result.output
        assert "useful link" in result.output
        assert "Elements: 2" in result.output

    def test_reads_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", "-"], input="<p>hi</p><p>there</p>")
        assert result.exit_code == 0
        assert result.output.startswith("<html>\n  <p>\n    hi\n  </p>")

    def test_root_tag_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", "--root-tag", "body", "-"], input="a<b></b>")
        assert result.exit_code == 0
        assert result.output.startswith("<body>")

    def test_parse_error_exits_nonzero(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", "-"], input="<div></span>")
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_max_depth_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["html", "--max-depth", "1", "-"], input="<a><b></b></a>"
        )
        assert result.exit_code == 1
        assert "nested deeper than 1" in result.output

    def test_empty_root_tag_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", "--root-tag", "", "-"], input="<a></a><b></b>")
        assert result.exit_code == 2
        assert "must be a non-empty tag name" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_missing_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", "does-not-exist.html"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# css command
# ---------------------------------------------------------------------------


class TestCssCommand:
    def test_prints_rules_and_summary(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["css", str(FIXTURES / "page.css")])
        assert result.exit_code == 0
        assert "h1, div.bar, #foo { padding: 10px; color: inherit; }" in result.output
        assert "p.lead.note { margin-left: 2.5px; color: #00ff7f; font-weight: bold; }" in result.output
        assert "Rules: 3  Declarations: 5" in result.output

    def test_parse_error_exits_nonzero(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["css", "-"], input="p { margin: 1em; }")
        assert result.exit_code == 1
        assert "Unknown unit 'em'" in result.output


# ---------------------------------------------------------------------------
# demo command
# ---------------------------------------------------------------------------


class TestDemoCommand:
    def test_demo_runs(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "<div>" in result.output
        assert "a { color: #aabbcc; }" in result.output

    def test_verbose_flag_logs_parser_activity(self, domstyle_logger: logging.Logger) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "demo"])
        assert result.exit_code == 0
        assert "DEBUG domstyle.dom.parser: Parsed 1 top-level node(s)" in result.output
        assert "DEBUG domstyle.stylesheet.parser: Parsed 2 rule(s)" in result.output
        assert domstyle_logger.level == logging.DEBUG

    def test_quiet_by_default(self, domstyle_logger: logging.Logger) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "DEBUG" not in result.output
