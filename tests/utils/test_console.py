"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Proxy delegation and injection (`set_console`).
2. Semantic logging wrappers and verbosity switching.
3. Diagnostics go to stderr, never stdout.
"""

import logging

import pytest
from rich.console import Console

from tinyc.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
  set_verbosity,
)


@pytest.fixture(autouse=True)
def cleanup_console():
  reset_console()
  yield
  reset_console()
  set_verbosity(False)


def test_proxy_delegates_to_backend():
  assert callable(console.print)
  assert isinstance(console.backend, Console)
  assert console.width == console.backend.width


def test_injected_console_receives_logs(log_buffer):
  log_info("Captured Log")
  log_success("Compiled: [path]prog.tiny[/path]")
  log_warning("Careful")

  output = log_buffer.getvalue()
  assert "Captured Log" in output
  assert "Compiled: prog.tiny" in output
  assert "Careful" in output
  assert "✅" in output


def test_error_text_is_not_markup(log_buffer):
  log_error("Expected ']', found '[end]'")
  assert "Expected ']', found '[end]'" in log_buffer.getvalue()


def test_reset_creates_fresh_backend():
  temp = Console()
  set_console(temp)
  assert console.backend is temp

  reset_console()
  assert console.backend is not temp


def test_diagnostics_go_to_stderr(capsys):
  log_info("InfoText")
  log_error("ErrorText")

  captured = capsys.readouterr()
  assert captured.out == ""
  assert "InfoText" in captured.err
  assert "ErrorText" in captured.err


def test_verbosity_toggles_debug(log_buffer):
  logging.getLogger("tinyc.test").debug("hidden trace")
  assert "hidden trace" not in log_buffer.getvalue()

  set_verbosity(True)
  logging.getLogger("tinyc.test").debug("shown trace")
  assert "shown trace" in log_buffer.getvalue()
