"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Shared Tiny programs, as source text and as node trees.
- Console isolation so log capture in one test never leaks into another.
"""

import io
import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'tinyc' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from rich.console import Console  # noqa: E402

from tinyc.syntax.nodes import (  # noqa: E402
  AssignmentStatement,
  BlockStatement,
  Declaration,
  Identifier,
  Literal,
  Tiny,
)
from tinyc.utils.console import reset_console, set_console  # noqa: E402

COUNTDOWN_SOURCE = """
// prints n, n-1, ..., 1 then whether n was even
var n, i: integer;
var even: boolean;
begin
  n := read;
  i := n;
  while i > 0 do begin
    output i;
    i := i - 1
  end;
  even := n % 2 == 0;
  if even then output true else output false
end
"""


@pytest.fixture
def countdown_source() -> str:
  return COUNTDOWN_SOURCE


@pytest.fixture
def assign_program() -> Tiny:
  """`var x: integer; begin x := 1 end` as a node tree."""
  return Tiny(
    declarations=(Declaration(ids=(Identifier("x"),), value_type="integer"),),
    body=BlockStatement(body=(AssignmentStatement(left=Identifier("x"), right=Literal(1)),)),
  )


@pytest.fixture
def log_buffer():
  """Routes rich logging into a string buffer for the duration of a test."""
  buffer = io.StringIO()
  set_console(Console(file=buffer, width=200, color_system=None))
  yield buffer
  reset_console()
