"""Test CLI functionality."""

import json

import pytest
from click.testing import CliRunner

from jumplinks.cli import cli, format_outline
from jumplinks.settings import get_defaults


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def base_args(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        """
[host]
installed_modules = ["ProcessRedirects"]

[jumplinks]
moduleDebug = true
""",
        encoding="utf-8",
    )
    return ["--config", str(config_file), "--log-file", str(tmp_path / "logs" / "jumplinks.log")]


def test_defaults_command(runner, base_args):
    result = runner.invoke(cli, [*base_args, "defaults"], obj={})

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == get_defaults()


def test_defaults_command_unknown_version(runner, base_args):
    result = runner.invoke(cli, [*base_args, "defaults", "--schema-version", "7"], obj={})

    assert result.exit_code != 0
    assert "Unknown settings schema version: 7" in result.output


def test_show_command_merges_persisted_values(runner, base_args):
    result = runner.invoke(cli, [*base_args, "show"], obj={})

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["moduleDebug"] is True
    assert data["wildcardCleaning"] == "fullClean"


def test_show_command_missing_config(runner, tmp_path):
    result = runner.invoke(
        cli,
        ["--config", str(tmp_path / "nope.toml"), "--log-file", str(tmp_path / "x.log"), "show"],
        obj={},
    )

    assert result.exit_code != 0
    assert "Configuration file not found" in result.output


def test_fields_command_outline(runner, base_args):
    result = runner.invoke(cli, [*base_args, "fields"], obj={})

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "wrapper: - [no]"
    assert lines[1] == "  fieldset: Wildcard Cleaning [never]"
    assert "    radios: wildcardCleaning [never]" in lines
    assert "  checkbox: 404 Monitor (enable404Monitor) [blank]" in lines
    assert "  fieldset: Info & Support [no]" in lines


def test_fields_command_json(runner, base_args):
    result = runner.invoke(cli, [*base_args, "fields", "--format", "json"], obj={})

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [c["collapsed"] for c in data["fields"]["children"]] == [
        "never",
        "yes",
        "blank",
        "blank",
        "no",
    ]
    assert data["js_config"] == {"pjModuleAdmin": True, "pjOldRedirectsInstalled": True}
    assert data["scripts"] == ["/site/modules/ProcessJumplinks/Assets/ProcessJumplinks.min.js"]


def test_format_outline_nested_depth():
    from jumplinks.fields import FieldDescriptorFactory
    from jumplinks.host import default_field_kinds

    factory = FieldDescriptorFactory(default_field_kinds())
    root = factory.build("wrapper")
    group = root.add(factory.build("fieldset", {"label": "Group", "collapsed": "yes"}))
    group.add(factory.build("markup", {"id": "docs", "label": "Docs"}))

    assert format_outline(root) == [
        "wrapper: - [no]",
        "  fieldset: Group [yes]",
        "    markup: Docs (docs) [no]",
    ]
