"""
Main Entry Point for the tinyc CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `tinyc.cli.handlers`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from tinyc import __version__
from tinyc.cli import handlers
from tinyc.config import RuntimeConfig
from tinyc.utils.console import log_error, log_info, set_verbosity


def _add_config_args(cmd: argparse.ArgumentParser) -> None:
  cmd.add_argument("--prefix", default=None, help="Identifier prefix (default: from toml, else 'tiny_')")
  cmd.add_argument("--runtime-module", default=None, help="Runtime module imported by generated code")
  cmd.add_argument("--indent", type=int, default=None, help="Indentation width of generated code")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(prog="tinyc", description="tinyc: Tiny to Python compiler")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Log every lowering step")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: PARSE ---
  cmd_parse = subparsers.add_parser("parse", help="Generate and print an AST in JSON format")
  cmd_parse.add_argument("input", type=Path, nargs="?", default=None, help="Tiny source (default: stdin)")
  cmd_parse.add_argument("output", type=Path, nargs="?", default=None, help="JSON destination (default: stdout)")
  cmd_parse.add_argument("-l", "--location", action="store_true", help="Include location metadata in the tree")

  # --- Command: COMPILE ---
  cmd_compile = subparsers.add_parser("compile", help="Generate a Python file from a Tiny file")
  cmd_compile.add_argument("input", type=Path, nargs="?", default=None, help="Tiny source (default: stdin)")
  cmd_compile.add_argument("output", type=Path, nargs="?", default=None, help="Python destination (default: stdout)")
  _add_config_args(cmd_compile)

  # --- Command: EXEC ---
  cmd_exec = subparsers.add_parser("exec", help="Compile and run the Tiny file")
  cmd_exec.add_argument("input", type=Path, nargs="?", default=None, help="Tiny source (default: stdin)")
  _add_config_args(cmd_exec)

  args = parser.parse_args(argv)
  set_verbosity(args.verbose)

  if args.command == "parse":
    return handlers.handle_parse(args.input, args.output, location=args.location)

  search_path = args.input.parent if args.input else None
  try:
    config = RuntimeConfig.load(
      search_path=search_path,
      identifier_prefix=args.prefix,
      runtime_module=args.runtime_module,
      indent_width=args.indent,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  if args.verbose:
    log_info(
      f"Configuration: prefix=[code]{config.identifier_prefix}[/code] "
      f"runtime=[code]{config.runtime_module}[/code] indent={config.indent_width}"
    )

  if args.command == "compile":
    return handlers.handle_compile(args.input, args.output, config)
  return handlers.handle_exec(args.input, config)


if __name__ == "__main__":
  raise SystemExit(main())
