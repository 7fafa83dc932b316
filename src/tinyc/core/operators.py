"""
Operator Table.

Maps Tiny operator tokens to LibCST operator node classes. Python spells
operators as distinct node shapes (`BinaryOperation`, `Comparison`,
`BooleanOperation`), so each token is tagged with its `OperatorKind`.
"""

from typing import Dict, Tuple, Type

import libcst as cst

from tinyc.enums import OperatorKind
from tinyc.errors import UnknownOperator

BINARY_OPERATORS: Dict[str, Tuple[OperatorKind, Type[cst.CSTNode]]] = {
  "+": (OperatorKind.ARITHMETIC, cst.Add),
  "-": (OperatorKind.ARITHMETIC, cst.Subtract),
  "*": (OperatorKind.ARITHMETIC, cst.Multiply),
  "/": (OperatorKind.ARITHMETIC, cst.Divide),
  "%": (OperatorKind.ARITHMETIC, cst.Modulo),
  "<": (OperatorKind.COMPARISON, cst.LessThan),
  "<=": (OperatorKind.COMPARISON, cst.LessThanEqual),
  ">": (OperatorKind.COMPARISON, cst.GreaterThan),
  ">=": (OperatorKind.COMPARISON, cst.GreaterThanEqual),
  "==": (OperatorKind.COMPARISON, cst.Equal),
  "!=": (OperatorKind.COMPARISON, cst.NotEqual),
  "&&": (OperatorKind.BOOLEAN, cst.And),
  "||": (OperatorKind.BOOLEAN, cst.Or),
}

UNARY_OPERATORS: Dict[str, Type[cst.CSTNode]] = {
  "-": cst.Minus,
  "+": cst.Plus,
  "!": cst.Not,
}

# Operands of these shapes are parenthesized so rendering keeps tree structure
COMPOUND_EXPRESSIONS = (cst.BinaryOperation, cst.Comparison, cst.BooleanOperation, cst.UnaryOperation)


def parenthesize(expr: cst.BaseExpression) -> cst.BaseExpression:
  """
  Wraps compound expressions in parentheses; atoms are returned as-is.

  Args:
      expr: A lowered operand.

  Returns:
      The operand, safe to embed in any enclosing operation.
  """
  if isinstance(expr, COMPOUND_EXPRESSIONS) and not expr.lpar:
    return expr.with_changes(lpar=[cst.LeftParen()], rpar=[cst.RightParen()])
  return expr


def build_binary(operator: str, left: cst.BaseExpression, right: cst.BaseExpression) -> cst.BaseExpression:
  """
  Builds the LibCST node for `left <operator> right`.

  Raises:
      UnknownOperator: If the token has no Python equivalent.
  """
  if operator not in BINARY_OPERATORS:
    raise UnknownOperator(operator, "binary")
  kind, op_cls = BINARY_OPERATORS[operator]
  left, right = parenthesize(left), parenthesize(right)

  if kind == OperatorKind.COMPARISON:
    return cst.Comparison(left=left, comparisons=[cst.ComparisonTarget(operator=op_cls(), comparator=right)])
  if kind == OperatorKind.BOOLEAN:
    return cst.BooleanOperation(left=left, operator=op_cls(), right=right)
  return cst.BinaryOperation(left=left, operator=op_cls(), right=right)


def build_unary(operator: str, argument: cst.BaseExpression) -> cst.UnaryOperation:
  """
  Builds the LibCST node for `<operator> argument`.

  Raises:
      UnknownOperator: If the token has no Python equivalent.
  """
  if operator not in UNARY_OPERATORS:
    raise UnknownOperator(operator, "unary")
  return cst.UnaryOperation(operator=UNARY_OPERATORS[operator](), expression=parenthesize(argument))
