"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from wp_env.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_get(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["--no-dotenv", "get", "SITE_NAME"], env={"SITE_NAME": "Example"})

    assert result.exit_code == 0
    assert result.output.strip() == "Example"


def test_get_typed_with_default(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli, ["--no-dotenv", "get", "WP_ENV_CLI_WORKERS", "--type", "int", "--default", "4"]
        )

    assert result.exit_code == 0
    assert result.output.strip() == "4"


def test_get_array(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli, ["--no-dotenv", "get", "HOSTS", "--type", "array"], env={"HOSTS": "a, b"}
        )

    assert json.loads(result.output) == ["a", "b"]


def test_get_array_default_is_split(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli, ["--no-dotenv", "get", "WP_ENV_CLI_HOSTS", "--type", "array", "--default", "a, b"]
        )

    assert result.exit_code == 0
    assert json.loads(result.output) == ["a", "b"]


def test_get_masks_sensitive_values(runner):
    with runner.isolated_filesystem():
        masked = runner.invoke(cli, ["--no-dotenv", "get", "DB_PASSWORD"], env={"DB_PASSWORD": "hunter2"})
        revealed = runner.invoke(
            cli, ["--no-dotenv", "get", "DB_PASSWORD", "--reveal"], env={"DB_PASSWORD": "hunter2"}
        )

    assert masked.output.strip() == "********"
    assert revealed.output.strip() == "hunter2"


def test_get_from_dotenv_file(runner):
    with runner.isolated_filesystem():
        with open("custom.env", "w") as f:
            f.write("WP_ENV_CLI_DB_NAME=wordpress\n")
        result = runner.invoke(cli, ["--dotenv", "custom.env", "get", "WP_ENV_CLI_DB_NAME"])

    assert result.exit_code == 0
    assert result.output.strip() == "wordpress"


def test_check_passes(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["--no-dotenv", "check", "A", "B"], env={"A": "1", "B": "2"})

    assert result.exit_code == 0
    assert "All required variables are set" in result.output


def test_check_fails(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli,
            ["--no-dotenv", "check", "A", "WP_ENV_CLI_MISSING1", "WP_ENV_CLI_MISSING2"],
            env={"A": "1"},
        )

    assert result.exit_code == 1
    assert "WP_ENV_CLI_MISSING1, WP_ENV_CLI_MISSING2" in result.output


def test_info_json(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["--no-dotenv", "info", "--json"], env={"WP_ENV": "staging"})

    assert result.exit_code == 0
    info = json.loads(result.output)
    assert info["environment"] == "staging"
    assert info["has_dotenv"] is False


def test_info_table(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["--no-dotenv", "info"])

    assert result.exit_code == 0
    assert "environment" in result.output


def test_bad_settings_file(runner):
    with runner.isolated_filesystem():
        with open("broken.yaml", "w") as f:
            f.write("- not a mapping\n")
        result = runner.invoke(cli, ["--settings", "broken.yaml", "info"])

    assert result.exit_code != 0
    assert "must be a mapping" in result.output
