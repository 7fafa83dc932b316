"""
Error Taxonomy.

All failures raised by tinyc derive from `TinyError`. Core transform failures
derive from `TransformError`; parser and runtime failures are kept separate so
callers can tell a malformed program from a missing lowering rule.
"""

from typing import Optional


class TinyError(Exception):
  """Base class for every tinyc failure."""


class TransformError(TinyError):
  """Raised when the source tree cannot be lowered to a Python tree."""


class UnknownNodeType(TransformError):
  """
  Raised when a node's tag has no registered lowering rule.

  Attributes:
      tag (str): The offending node tag.
  """

  def __init__(self, tag: str):
    self.tag = tag
    super().__init__(f"No transformer for node type: {tag}")


class UnknownValueType(TransformError):
  """
  Raised when a declaration names a value type without a default initializer.

  Attributes:
      value_type (str): The offending type name.
  """

  def __init__(self, value_type: str):
    self.value_type = value_type
    super().__init__(f"No default value for declared type: {value_type}")


class UnknownOperator(TransformError):
  """
  Raised when an operator token has no Python equivalent.

  Attributes:
      operator (str): The offending token.
  """

  def __init__(self, operator: str, arity: str = "binary"):
    self.operator = operator
    self.arity = arity
    super().__init__(f"Unsupported {arity} operator: {operator!r}")


class UnresolvedSuspension(TransformError):
  """Raised when a suspension reaches block construction without a continuation."""

  def __init__(self) -> None:
    super().__init__("Suspending statement reached the target tree without a continuation")


class TinySyntaxError(TinyError):
  """
  Raised by the parser for malformed Tiny source.

  Attributes:
      line (int): 1-based line of the offending token.
      column (int): 1-based column of the offending token.
  """

  def __init__(self, message: str, line: int, column: int, found: Optional[str] = None):
    self.message = message
    self.line = line
    self.column = column
    self.found = found
    super().__init__(f"Syntax error on line {line}, column {column}: {message}")


class TinyRuntimeError(TinyError):
  """Raised by the runtime library that generated programs call into."""
