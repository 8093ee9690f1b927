"""Tests for the MagasiID command line interface."""
import pytest
from click.testing import CliRunner

from magasiid import __version__
from magasiid import dependencies
from magasiid.cli import cli
from magasiid.utils.id_generation import calculate_checksum, validate_id


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli_framework(v, monkeypatch):
    """Route the CLI's preconfigure() to the isolated test Variables."""
    monkeypatch.setattr(dependencies, "preconfigure", lambda *args, **kwargs: (v, None))
    return v


def test_checksum_command(runner):
    result = runner.invoke(cli, ["checksum", "ABC-123"])
    assert result.exit_code == 0
    assert result.output.strip() == calculate_checksum("ABC123")


def test_format_command(runner):
    result = runner.invoke(cli, ["format", "ABCDEFGH", "XXXX-XXXX"])
    assert result.exit_code == 0
    assert result.output.strip() == "ABCD-EFGH"


def test_validate_command(runner):
    body = "SIAS-ABC"
    good = f"{body}-{calculate_checksum(body)}"
    result = runner.invoke(cli, ["validate", good])
    assert result.exit_code == 0
    assert result.output.strip() == "valid"

    result = runner.invoke(cli, ["validate", "NOPE-ABC-0"])
    assert result.exit_code == 1
    assert result.output.strip() == "invalid"


def test_validate_command_options(runner):
    result = runner.invoke(cli, ["validate", "anything", "--no-prefix", "--no-checksum"])
    assert result.exit_code == 0
    assert result.output.strip() == "valid"


def test_validate_command_no_dashes(runner):
    body = "SIASABC"
    result = runner.invoke(cli, ["validate", body + calculate_checksum(body), "--no-dashes"])
    assert result.exit_code == 0
    assert result.output.strip() == "valid"


def test_validate_command_rejects_generation_options(runner):
    for args in (["--length", "4"], ["--no-timestamp"], ["--charset", "AB"], ["--format", "XX"]):
        result = runner.invoke(cli, ["validate", "SIAS-ABC-0", *args])
        assert result.exit_code == 2, args
        assert "No such option" in result.output


def test_version_command(runner):
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate_command(runner, cli_framework):
    result = runner.invoke(cli, ["generate", "--count", "3", "--prefix", "CLI"])
    assert result.exit_code == 0, result.output
    ids = result.output.split()
    assert len(ids) == 3
    assert all(validate_id(id_, {"prefix": "CLI"}) for id_ in ids)


def test_generate_command_layout_options(runner, cli_framework):
    result = runner.invoke(
        cli,
        ["generate", "--no-prefix", "--no-timestamp", "--no-dashes", "--no-checksum",
         "--length", "6", "--charset", "Z"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "ZZZZZZ"


def test_generate_command_rejects_bad_config(runner, cli_framework):
    result = runner.invoke(cli, ["generate", "--length", "-3"])
    assert result.exit_code == 2
