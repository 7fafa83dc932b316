"""
Stream plumbing and failure reporting shared by the command handlers.

Paths default to the standard streams, mirroring Unix filter conventions.
"""

import sys
from pathlib import Path
from typing import Optional

from tinyc.core.compile_result import CompileResult
from tinyc.utils.console import console, log_error


def read_input(path: Optional[Path]) -> str:
  """
  Reads an entire source file, or stdin when no path is given.

  Raises:
      OSError: If the file cannot be read.
  """
  if path is None:
    return sys.stdin.read()
  with open(path, "rt", encoding="utf-8") as f:
    return f.read()


def write_output(path: Optional[Path], text: str) -> None:
  """
  Writes `text` to a file (creating parent directories), or stdout when no path is given.
  """
  if not text.endswith("\n"):
    text += "\n"
  if path is None:
    sys.stdout.write(text)
    return
  path.parent.mkdir(parents=True, exist_ok=True)
  with open(path, "wt", encoding="utf-8") as f:
    f.write(text)


def report_failure(result: CompileResult, source: str) -> None:
  """
  Logs every error of a failed compilation. For syntax errors, also prints
  the offending source line with a caret under the reported column.
  """
  for err in result.errors:
    log_error(err)
  lines = source.splitlines()
  if result.line is None or not 1 <= result.line <= len(lines):
    return
  console.print(f"  {lines[result.line - 1]}", markup=False, highlight=False)
  console.print(f"  {' ' * (result.column - 1)}^", markup=False, highlight=False)
