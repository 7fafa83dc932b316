"""
Enumerations for tinyc.

This module defines the small closed vocabularies shared by the parser,
the node loader and the lowering rules.
"""

from enum import Enum


class ValueType(str, Enum):
  """
  Declared value types of Tiny variables.

  Used only to pick the default initializer of a declaration; the type is
  discarded once lowered.
  """

  INTEGER = "integer"
  BOOLEAN = "boolean"


class OperatorKind(str, Enum):
  """
  Families of Tiny operators, each mapping to a distinct LibCST node shape.
  """

  ARITHMETIC = "arithmetic"  # BinaryOperation
  COMPARISON = "comparison"  # Comparison
  BOOLEAN = "boolean"  # BooleanOperation
