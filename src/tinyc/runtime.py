"""
Runtime library for generated programs.

Every compiled Tiny program starts with ``import tinyc.runtime as runtime``
and calls into `read` and `output`.
"""

import sys
from typing import Any, Optional, TextIO

from tinyc.errors import TinyRuntimeError


def read(stream: Optional[TextIO] = None) -> int:
  """
  Reads one integer from a line of input.

  Args:
      stream (TextIO, optional): Source of input; defaults to `sys.stdin`.

  Returns:
      int: The parsed value.

  Raises:
      TinyRuntimeError: If the line is not a base-10 integer (including EOF).
  """
  line = (stream or sys.stdin).readline()
  try:
    return int(line.strip(), 10)
  except ValueError:
    raise TinyRuntimeError(f"expected an integer, got {line.strip()!r}") from None


def format_value(value: Any) -> str:
  """
  Formats a value the way Tiny spells it: booleans as `true`/`false`, and
  integral quotients of `/` without a fractional part (`4 / 2` prints `2`).
  """
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, float) and value.is_integer():
    return str(int(value))
  return str(value)


def output(value: Any, stream: Optional[TextIO] = None) -> None:
  """
  Writes a value and a newline to standard output.

  Args:
      value: The value to print.
      stream (TextIO, optional): Destination; defaults to `sys.stdout`.
  """
  out = stream or sys.stdout
  out.write(format_value(value) + "\n")
