"""Tests for the shared CLI helpers in csdk_extract.cli."""

import json

import pytest
import typer

from csdk_extract.cli import error_exit, json_print, warn


class TestErrorExit:
    def test_plain_stderr_and_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            error_exit("STAX_SDK is not set")
        assert exc_info.value.exit_code == 1
        captured = capsys.readouterr()
        assert "error:" in captured.err
        assert "STAX_SDK is not set" in captured.err
        assert captured.out == ""

    def test_single_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit):
            error_exit("Unsupported device type 'x'. Supported types are: " + "a, " * 40)
        assert capsys.readouterr().err.count("\n") == 1

    def test_markup_not_interpreted(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit):
            error_exit("Unexpected format for define: -D[bold]X=1=2")
        assert "-D[bold]X=1=2" in capsys.readouterr().err

    def test_custom_exit_code(self) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            error_exit("fatal", code=2)
        assert exc_info.value.exit_code == 2

    def test_json_mode_stdout_and_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit):
            error_exit("bad input", json_mode=True)
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"error": "bad input"}
        assert captured.err.strip() == "error: bad input"

    def test_json_mode_single_stderr_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            error_exit("Unsupported device type 'nanos'", json_mode=True)
        assert exc_info.value.exit_code == 1
        err = capsys.readouterr().err
        assert err.count("\n") == 1
        assert "Unsupported device type 'nanos'" in err


class TestWarn:
    def test_stderr_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        warn("Current cflags file does not match reference for target stax")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == (
            "warning: Current cflags file does not match reference for target stax"
        )


class TestJsonPrint:
    def test_dict_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        json_print({"device": "stax", "defines": 42})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"device": "stax", "defines": 42}
        assert captured.err == ""

    def test_pretty_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        json_print({"a": 1})
        assert "\n" in capsys.readouterr().out
