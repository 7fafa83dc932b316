"""
CLI Command Handlers.

One module per command; each handler returns a process exit code.
"""

from tinyc.cli.handlers.compile import handle_compile
from tinyc.cli.handlers.execute import handle_exec
from tinyc.cli.handlers.parse import handle_parse

__all__ = [
  "handle_compile",
  "handle_exec",
  "handle_parse",
]
