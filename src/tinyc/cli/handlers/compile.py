"""
Compile Command Handler.

Implements `tinyc compile`: Tiny source in, Python source out.
"""

from pathlib import Path
from typing import Optional

from tinyc.cli.handlers.io import read_input, report_failure, write_output
from tinyc.config import RuntimeConfig
from tinyc.core.engine import TinyEngine
from tinyc.utils.console import log_error, log_success


def handle_compile(input_path: Optional[Path], output_path: Optional[Path], config: RuntimeConfig) -> int:
  """
  Handles the 'compile' command execution.

  Args:
      input_path: Tiny source file, or None for stdin.
      output_path: Destination for generated Python, or None for stdout.
      config: Runtime configuration for the engine.

  Returns:
      int: Exit code (0 for success, 1 for failure).
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

  write_output(output_path, result.code)
  if output_path:
    log_success(f"Compiled: [path]{input_path or '<stdin>'}[/path] -> [path]{output_path}[/path]")
  return 0
