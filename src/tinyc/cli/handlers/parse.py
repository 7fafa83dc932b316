"""
Parse Command Handler.

Implements `tinyc parse`: prints the Tiny source AST as JSON.
"""

import json
from pathlib import Path
from typing import Optional

from tinyc.cli.handlers.io import read_input, write_output
from tinyc.errors import TinySyntaxError
from tinyc.syntax import parse, to_dict
from tinyc.utils.console import log_error


def handle_parse(input_path: Optional[Path], output_path: Optional[Path], location: bool = False) -> int:
  """
  Handles the 'parse' command execution.

  Args:
      input_path: Tiny source file, or None for stdin.
      output_path: Destination for the JSON tree, or None for stdout.
      location: Include line/column metadata on every node.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  try:
    source = read_input(input_path)
    tree = parse(source, location=location)
  except TinySyntaxError as e:
    log_error(str(e))
    return 1
  except OSError as e:
    log_error(f"Cannot read input: {e}")
    return 1

  write_output(output_path, json.dumps(to_dict(tree, include_location=location), indent=2))
  return 0
