"""Integration tests for CLI commands.

Each test runs a ``simario`` command end to end against descriptions and
codings files written to a temporary directory.
"""

import pytest
from click.testing import CliRunner

from simario.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def file_args(dictionary_files):
    descriptions, codings = dictionary_files
    return ["--descriptions", str(descriptions), "--codings", str(codings)]


@pytest.mark.integration
class TestDescribeCommand:
    def test_describe_help(self, runner):
        result = runner.invoke(app, ["describe", "--help"])

        assert result.exit_code == 0
        assert "VARNAMES" in result.output
        assert "--descriptions" in result.output
        assert "--codings" in result.output

    def test_describe_variables(self, runner, file_args):
        result = runner.invoke(app, ["describe", "kids", "SESBTH", *file_args])

        assert result.exit_code == 0, result.output
        assert "Data Dictionary" in result.output
        assert "Number of children" in result.output
        assert "Professional" in result.output

    def test_describe_unknown_variable(self, runner, file_args):
        result = runner.invoke(app, ["describe", "nosuchvar", *file_args])

        assert result.exit_code == 1
        assert "does not exist in the data dictionary" in result.output

    def test_describe_missing_descriptions_file(self, runner, tmp_path):
        result = runner.invoke(
            app, ["describe", "kids", "--descriptions", str(tmp_path / "none.csv")]
        )

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_verbose_prints_statistics(self, runner, file_args):
        result = runner.invoke(app, ["describe", "kids", "-v", *file_args])

        assert result.exit_code == 0, result.output
        assert "Dictionary Statistics" in result.output

    def test_config_file_locates_dictionary(self, runner, dictionary_files, tmp_path):
        descriptions, codings = dictionary_files
        config_file = tmp_path / "simario.toml"
        config_file.write_text(
            f"[paths]\ndescriptions_file = '{descriptions}'\n"
            f"codings_file = '{codings}'\n",
            encoding="utf-8",
        )

        result = runner.invoke(
            app, ["describe", "z1singleLvl1", "--config", str(config_file)]
        )

        assert result.exit_code == 0, result.output
        assert "Single parent" in result.output


@pytest.mark.integration
class TestCodesCommand:
    def test_codes(self, runner, file_args):
        result = runner.invoke(app, ["codes", "SESBTH", "1", "3", "9", *file_args])

        assert result.exit_code == 0, result.output
        assert "Categories of SESBTH" in result.output
        assert "Professional" in result.output
        assert "Semi-skilled" in result.output
        assert "no label" in result.output

    def test_grouped_codes(self, runner, file_args):
        result = runner.invoke(
            app,
            [
                "codes",
                "z1singleLvl1",
                "1 0",
                "2 1",
                "--group-by",
                "r1stchildethn",
                *file_args,
            ],
        )

        assert result.exit_code == 0, result.output
        assert "European No" in result.output
        assert "Maori Yes" in result.output

    def test_malformed_grouped_codes(self, runner, file_args):
        result = runner.invoke(
            app,
            ["codes", "z1singleLvl1", "2", "--group-by", "r1stchildethn", *file_args],
        )

        assert result.exit_code == 2
        assert "not of the form" in result.output

    def test_codes_requires_values(self, runner, file_args):
        result = runner.invoke(app, ["codes", "SESBTH", *file_args])

        assert result.exit_code == 2
