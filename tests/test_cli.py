# =============================================================================
# test_cli.py - mlcheck Command-Line Tests
# =============================================================================

import pytest
from click.testing import CliRunner

from minicheck.cli.errors import ExitCode
from minicheck.cli.mlcheck import main
from minicheck.parser import Parser


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_source(tmp_path):
    def _write(text: str, name: str = "prog.mini"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


class TestMlcheckCLI:
    """Tests for the mlcheck CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Check a mini language program" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_accepted_program(self, runner, write_source):
        path = write_source("PROGRAM P\nINT a;\na = 5;\nEND PROGRAM\n")
        result = runner.invoke(main, [path])

        assert result.exit_code == ExitCode.SUCCESS
        assert "Successful Parsing" in result.output

    def test_rejected_program(self, runner, write_source):
        path = write_source("PROGRAM P\nINT a;\nb = 5;\nEND PROGRAM\n")
        result = runner.invoke(main, [path])

        assert result.exit_code == ExitCode.CHECK_FAILED
        lines = result.output.splitlines()
        assert lines[0] == "3: Undeclared Variable"
        assert "Unsuccessful Parsing" in lines
        assert "Number of Syntax Errors: 1" in lines

    def test_quiet_prints_diagnostics_only(self, runner, write_source):
        path = write_source("")
        result = runner.invoke(main, ["-q", path])

        assert result.exit_code == ExitCode.CHECK_FAILED
        assert result.output == "1: Empty File\n"

    def test_lexical_error(self, runner, write_source):
        path = write_source("PROGRAM P WRITE 1 $ 2; END PROGRAM")
        result = runner.invoke(main, [path])

        assert result.exit_code == ExitCode.CHECK_FAILED
        assert "1: invalid character '$'" in result.output

    def test_tokens_dump(self, runner, write_source):
        path = write_source("PROGRAM P\nWRITE 1;")
        result = runner.invoke(main, ["--tokens", path])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Token(PROGRAM, 1)",
            "Token(IDENT, 'P', 1)",
            "Token(WRITE, 2)",
            "Token(ICONST, '1', 2)",
            "Token(SEMICOLON, 2)",
            "Token(DONE, 2)",
        ]

    def test_tokens_dump_lexical_error(self, runner, write_source):
        path = write_source('WRITE "abc')
        result = runner.invoke(main, ["--tokens", path])
        assert result.exit_code == ExitCode.CHECK_FAILED

    def test_symbols_listing(self, runner, write_source):
        path = write_source("PROGRAM P\nINT a, b;\nFLOAT c;\nEND PROGRAM\n")
        result = runner.invoke(main, ["--symbols", path])

        assert result.exit_code == 0
        assert "a: INT (line 2)" in result.output
        assert "c: FLOAT (line 3)" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.mini")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_internal_error_exit_code(self, runner, write_source, monkeypatch):
        def broken_statement(self):
            token = self.tokens.next()
            self.tokens.push_back(token)
            self.tokens.push_back(token)
            return True

        monkeypatch.setattr(Parser, "statement", broken_statement)
        path = write_source("PROGRAM P WRITE 1; END PROGRAM")
        result = runner.invoke(main, [path])

        assert result.exit_code == ExitCode.INTERNAL_ERROR
