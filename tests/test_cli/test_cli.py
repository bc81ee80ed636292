"""Tests for the selectorkit CLI commands."""

import json

import pytest
from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.builder import SequenceError
from selectorkit.cli.build import build_from_tokens
from selectorkit.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "rectangle" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_compound(self, runner):
        result = runner.invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_combinators(self, runner):
        result = runner.invoke(
            cli,
            ["build", "element=div", "id=main", "~", "element=table", "id=data"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div#main ~ table#data"

    def test_verbose(self, runner):
        result = runner.invoke(cli, ["-v", "build", "class=a"])
        assert result.exit_code == 0
        assert ".a" in result.output

    def test_sequence_error(self, runner):
        result = runner.invoke(cli, ["build", "class=a", "id=b"])
        assert result.exit_code == 1
        assert "arranged in the following order" in result.output

    def test_repeat_error(self, runner):
        result = runner.invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind(self, runner):
        result = runner.invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 1
        assert "Unknown fragment kind" in result.output

    def test_no_tokens(self, runner):
        result = runner.invoke(cli, ["build"])
        assert result.exit_code != 0


class TestBuildFromTokens:
    def test_nested_combinators(self):
        selector = build_from_tokens(
            ["element=ul", ">", "element=li", "+", "element=li", "class=last"]
        )
        assert selector.stringify() == "ul > li + li.last"

    def test_value_keeps_later_equals(self):
        assert build_from_tokens(["attr=lang=en"]).stringify() == "[lang=en]"

    def test_leading_combinator(self):
        with pytest.raises(ValueError, match="no selector on its left"):
            build_from_tokens([">", "element=a"])

    def test_trailing_combinator(self):
        with pytest.raises(ValueError, match="no selector on its right"):
            build_from_tokens(["element=a", ">"])

    def test_ordering_checked_per_compound(self):
        # Each side of a combinator is its own compound selector.
        assert build_from_tokens(["class=a", "+", "element=b"]).stringify() == ".a + b"
        with pytest.raises(SequenceError):
            build_from_tokens(["class=a", "element=b"])


# ---------------------------------------------------------------------------
# rectangle command
# ---------------------------------------------------------------------------


class TestRectangleCommand:
    def test_plain(self, runner):
        result = runner.invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert "Width:  10" in result.output
        assert "Height: 20" in result.output
        assert "Area:   200" in result.output

    def test_json(self, runner):
        result = runner.invoke(cli, ["rectangle", "10", "20", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":10,"height":20,"area":200}'

    def test_fractional(self, runner):
        result = runner.invoke(cli, ["rectangle", "1.5", "2", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"width": 1.5, "height": 2, "area": 3.0}

    def test_bad_number(self, runner):
        result = runner.invoke(cli, ["rectangle", "ten", "20"])
        assert result.exit_code != 0
