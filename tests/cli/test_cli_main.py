"""
Integration tests for the tinyc CLI entry point.

Verifies:
1. `parse` prints the JSON tree (with optional locations).
2. `compile` writes Python to stdout or a file.
3. `exec` runs programs against stdin.
4. Failures return exit code 1 with a diagnostic on stderr only.
"""

import io
import json

import pytest

from tinyc import __version__
from tinyc.cli.__main__ import main


@pytest.fixture
def program(tmp_path):
  def _write(source: str, name: str = "prog.tiny"):
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return path

  return _write


def test_parse_prints_json(program, capsys):
  path = program("begin output 1 end")
  assert main(["parse", str(path)]) == 0

  data = json.loads(capsys.readouterr().out)
  assert data["type"] == "Tiny"
  assert data["body"]["body"][0] == {"type": "OutputStatement", "value": {"type": "Literal", "value": 1}}


def test_parse_with_location(program, capsys):
  path = program("begin\n  output 1\nend")
  assert main(["parse", str(path), "--location"]) == 0

  data = json.loads(capsys.readouterr().out)
  assert data["body"]["body"][0]["location"] == {"line": 2, "column": 3}


def test_parse_reads_stdin(monkeypatch, capsys):
  monkeypatch.setattr("sys.stdin", io.StringIO("begin end"))
  assert main(["parse"]) == 0
  assert json.loads(capsys.readouterr().out)["declarations"] == []


def test_compile_to_stdout(program, capsys):
  path = program("var x: integer; begin x := read; output x end")
  assert main(["compile", str(path)]) == 0

  captured = capsys.readouterr()
  assert captured.out == (
    "import tinyc.runtime as runtime\ntiny_x = 0\ntiny_x = runtime.read()\nruntime.output(tiny_x)\n"
  )
  assert captured.err == ""


def test_compile_to_file(program, tmp_path, capsys):
  path = program("begin output true end")
  target = tmp_path / "out" / "prog.py"
  assert main(["compile", str(path), str(target)]) == 0

  assert target.read_text() == "import tinyc.runtime as runtime\nruntime.output(True)\n"
  captured = capsys.readouterr()
  assert captured.out == ""
  assert "Compiled" in captured.err


def test_compile_options(program, capsys):
  path = program("var x: integer; begin while x < 1 do x := 1 end")
  assert main(["compile", str(path), "--prefix", "v_", "--indent", "2", "--runtime-module", "rt"]) == 0

  out = capsys.readouterr().out
  assert out.startswith("import rt as runtime\n")
  assert "while v_x < 1:\n  v_x = 1\n" in out


def test_compile_reads_toml_next_to_source(program, tmp_path, capsys):
  (tmp_path / "pyproject.toml").write_text('[tool.tinyc]\nidentifier_prefix = "t_"\n')
  path = program("var x: integer; begin end")
  assert main(["compile", str(path)]) == 0
  assert "t_x = 0" in capsys.readouterr().out


def test_invalid_prefix_is_reported(program, capsys):
  path = program("begin end")
  assert main(["compile", str(path), "--prefix", "9"]) == 1
  captured = capsys.readouterr()
  assert captured.out == ""
  assert "Invalid configuration" in captured.err


def test_prefix_spelling_runtime_alias_is_rejected(program, capsys):
  path = program("var time: integer; begin time := 1; output time end")
  assert main(["exec", str(path), "--prefix", "run"]) == 1
  captured = capsys.readouterr()
  assert captured.out == ""
  assert "runtime" in captured.err


def test_verbose_reports_configuration(program, capsys):
  path = program("begin end")
  assert main(["-v", "compile", str(path), "--prefix", "v_"]) == 0
  assert "Configuration: prefix=v_" in capsys.readouterr().err


def test_syntax_error_exit_code(program, capsys):
  path = program("begin\n  output\nend")
  assert main(["compile", str(path)]) == 1

  captured = capsys.readouterr()
  assert captured.out == ""
  assert "Syntax error on line 3, column 1" in captured.err
  assert "  end\n  ^\n" in captured.err


def test_missing_input_file(tmp_path, capsys):
  assert main(["compile", str(tmp_path / "absent.tiny")]) == 1
  assert "Cannot read input" in capsys.readouterr().err


def test_exec_runs_program(program, monkeypatch, capsys):
  path = program("var n: integer; begin n := read; output n * 2; output n > 1 end")
  monkeypatch.setattr("sys.stdin", io.StringIO("21\n"))

  assert main(["exec", str(path)]) == 0
  assert capsys.readouterr().out == "42\ntrue\n"


def test_exec_reports_bad_input(program, monkeypatch, capsys):
  path = program("var n: integer; begin n := read end")
  monkeypatch.setattr("sys.stdin", io.StringIO("twelve\n"))

  assert main(["exec", str(path)]) == 1
  assert "Runtime error: expected an integer" in capsys.readouterr().err


def test_exec_reports_division_by_zero(program, capsys):
  path = program("begin output 1 % 0 end")
  assert main(["exec", str(path)]) == 1
  assert "Runtime error" in capsys.readouterr().err


def test_version(capsys):
  with pytest.raises(SystemExit) as exc:
    main(["--version"])
  assert exc.value.code == 0
  assert __version__ in capsys.readouterr().out


def test_command_is_required(capsys):
  with pytest.raises(SystemExit) as exc:
    main([])
  assert exc.value.code == 2


def test_exec_syntax_error_points_at_column(program, capsys):
  path = program("var x: integer;\nbegin x := 1 +* 2 end")
  assert main(["exec", str(path)]) == 1

  err = capsys.readouterr().err
  assert "Syntax error on line 2, column 16" in err
  assert "  begin x := 1 +* 2 end\n" + " " * 17 + "^\n" in err
