"""CLI tests — argument handling, output formats and exit codes."""

import io
import json
import textwrap

import pytest
from rich.console import Console

from simple_prompt.cli import EXIT_CONFIG, EXIT_INCOMPLETE, EXIT_OK, main
from simple_prompt.terminal import ScriptedTerminal


@pytest.fixture
def question_file(tmp_path):
    path = tmp_path / "questions.yaml"
    path.write_text(textwrap.dedent("""
        - text: Name
          required: true
          color: red
        - id: age
          text: Age
          type: int
    """), encoding="utf-8")
    return path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100, color_system=None)


def test_json_output(question_file, console):
    term = ScriptedTerminal(["", "Ann", "30"])
    code = main([str(question_file), "--json", "--no-color"], terminal=term, console=console)

    assert code == EXIT_OK
    payload = json.loads(console.file.getvalue())
    assert payload["type"] == "complete"
    assert payload["answers"] == {"Name": "Ann", "age": 30}
    assert term.transcript == ["Name: ", "Name (required): ", "Age: "]


def test_table_output(question_file, console):
    term = ScriptedTerminal(["Ann", "30"])
    code = main([str(question_file)], terminal=term, console=console)

    assert code == EXIT_OK
    out = console.file.getvalue()
    assert "Answers" in out
    assert "Ann" in out
    assert "30" in out


def test_incomplete_input(question_file, console):
    term = ScriptedTerminal([])
    code = main([str(question_file), "--json"], terminal=term, console=console)

    assert code == EXIT_INCOMPLETE
    payload = json.loads(console.file.getvalue())
    assert payload["type"] == "error"
    assert payload["reason"] == "input closed"


def test_missing_file(tmp_path, console, capsys):
    code = main([str(tmp_path / "missing.yaml")], terminal=ScriptedTerminal(), console=console)
    assert code == EXIT_CONFIG
    assert "Missing YAML file" in capsys.readouterr().err


def test_broken_question_file(tmp_path, console):
    path = tmp_path / "bad.yaml"
    path.write_text("- text: X\n  type: date\n", encoding="utf-8")
    code = main([str(path)], terminal=ScriptedTerminal(), console=console)
    assert code == EXIT_CONFIG


def test_unknown_log_level_from_env(question_file, console, monkeypatch, capsys):
    monkeypatch.setenv("PROMPT_LOG_LEVEL", "FOO")
    code = main([str(question_file)], terminal=ScriptedTerminal(), console=console)
    assert code == EXIT_CONFIG
    assert "Unknown log level: 'FOO'" in capsys.readouterr().err


def test_unknown_log_level_option(question_file, console):
    with pytest.raises(SystemExit) as exc_info:
        main([str(question_file), "--log-level", "foo"], terminal=ScriptedTerminal(), console=console)
    assert exc_info.value.code == EXIT_CONFIG


def test_log_level_option_is_case_insensitive(question_file, console):
    term = ScriptedTerminal(["Ann", "30"])
    code = main([str(question_file), "--log-level", "debug"], terminal=term, console=console)
    assert code == EXIT_OK
