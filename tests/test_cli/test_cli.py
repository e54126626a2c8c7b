"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli
from selectorkit.config import SelectorKitConfig


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selector strings" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "build" in result.output
        assert "combine" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_full_selector(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "build",
                "element=a", "id=x", "class=c1", "class=c2",
                "attr=href", "pseudo-class=hover", "pseudo-element=before",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "a#x.c1.c2[href]:hover::before"

    def test_attribute_value_may_contain_equals(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "element=input", 'attribute=type="text"'])
        assert result.exit_code == 0
        assert result.output.strip() == 'input[type="text"]'

    def test_order_error_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "class=a", "element=div"])
        assert result.exit_code == 1
        assert "Error: Selector parts should be arranged" in result.output

    def test_duplicate_error_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 2
        assert "unknown kind" in result.output

    def test_missing_equals_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "div"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_requires_tokens(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_child_combinator(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "class=a", ">", "id=b"])
        assert result.exit_code == 0
        assert result.output.strip() == ".a > #b"

    def test_multi_fragment_sides(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "element=ul class=nav", "~", "element=li"])
        assert result.exit_code == 0
        assert result.output.strip() == "ul.nav ~ li"

    def test_invalid_side_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "id=a id=b", ">", "element=p"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_quoted_fragment_keeps_spaces(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["combine", "element=a 'attr=title=\"a b\"'", ">", "element=span"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[title="a b"] > span'

    def test_unbalanced_quote_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "'attr=title", ">", "element=p"])
        assert result.exit_code == 2
        assert "No closing quotation" in result.output


# ---------------------------------------------------------------------------
# configuration
# ---------------------------------------------------------------------------


class TestConfig:
    def test_defaults(self) -> None:
        config = SelectorKitConfig()
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTORKIT_LOG_LEVEL", "debug")
        assert SelectorKitConfig.from_env().log_level == "DEBUG"

    def test_from_env_default(self, monkeypatch) -> None:
        monkeypatch.delenv("SELECTORKIT_LOG_LEVEL", raising=False)
        assert SelectorKitConfig.from_env().log_level == "WARNING"

    def test_log_level_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "debug", "build", "element=p"])
        assert result.exit_code == 0
        assert "p" in result.output

    def test_from_env_unknown_level_falls_back(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTORKIT_LOG_LEVEL", "verbose")
        assert SelectorKitConfig.from_env().log_level == "WARNING"

    def test_unknown_env_level_does_not_break_commands(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTORKIT_LOG_LEVEL", "verbose")
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "element=a"])
        assert result.exit_code == 0
        assert result.output.strip() == "a"
