"""
Exec Command Handler.

Implements `tinyc exec`: compiles a Tiny program and runs the generated Python
in-process. The program's `read` calls consume standard input, so the source
should normally come from a file.
"""

from pathlib import Path
from typing import Optional

from tinyc.cli.handlers.io import read_input, report_failure
from tinyc.config import RuntimeConfig
from tinyc.core.engine import TinyEngine
from tinyc.errors import TinyRuntimeError
from tinyc.utils.console import log_error


def handle_exec(input_path: Optional[Path], config: RuntimeConfig) -> int:
  """
  Handles the 'exec' command execution.

  Args:
      input_path: Tiny source file, or None for stdin.
      config: Runtime configuration for the engine.

  Returns:
      int: Exit code (0 for success, 1 for compile or runtime failure).
  """
  try:
    source = read_input(input_path)
  except OSError as e:
    log_error(f"Cannot read input: {e}")
    return 1

  result = TinyEngine(config=config).run(source)
  if not result.success:
    report_failure(result, source)
    return 1

  filename = str(input_path) if input_path else "<stdin>"
  program = compile(result.code, filename, "exec")
  try:
    exec(program, {"__name__": "__main__"})
  except (TinyRuntimeError, ArithmeticError) as e:
    log_error(f"Runtime error: {e}")
    return 1
  return 0
