"""
Node Transformation Registry.

`TinyLowering` holds one pure rule per Tiny node variant, named after LibCST's
visitor convention (`leave_<Tag>`). Rules receive a node whose children have
already been lowered by the walker and return the LibCST node of the
equivalent Python construct.

Lowering at a glance::

    var x: integer;              import tinyc.runtime as runtime
    begin                        tiny_x = 0
      x := read;          ->     tiny_x = runtime.read()
      if x > 0 then              if tiny_x > 0:
        output x                     runtime.output(tiny_x)
    end                          else:
                                     pass

Python has no bare block statement, so a lowered `BlockStatement` is a
`cst.IndentedBlock` which enclosing suites splice in. Tiny has no block-local
declarations, so splicing preserves meaning.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

import libcst as cst

from tinyc.config import RUNTIME_NAME, RuntimeConfig
from tinyc.core.continuations import Suspending, expand_continuations, render_suspension
from tinyc.core.operators import build_binary, build_unary
from tinyc.enums import ValueType
from tinyc.errors import UnknownNodeType, UnknownValueType
from tinyc.syntax.nodes import (
  NODE_TYPES,
  AssignmentStatement,
  BinaryExpression,
  BlockStatement,
  Declaration,
  Identifier,
  IfStatement,
  Literal,
  OutputStatement,
  ReadExpression,
  Tiny,
  TinyNode,
  UnaryExpression,
  WhileStatement,
)

logger = logging.getLogger(__name__)

DEFAULT_VALUES: Dict[ValueType, Callable[[], cst.BaseExpression]] = {
  ValueType.INTEGER: lambda: cst.Integer("0"),
  ValueType.BOOLEAN: lambda: cst.Name("False"),
}

Lowered = Union[cst.CSTNode, Suspending, tuple, None]


def empty_statement() -> cst.SimpleStatementLine:
  """The explicit empty statement (`pass`)."""
  return cst.SimpleStatementLine(body=[cst.Pass()])


def _dotted(path: str) -> Union[cst.Name, cst.Attribute]:
  parts = path.split(".")
  node: Union[cst.Name, cst.Attribute] = cst.Name(parts[0])
  for part in parts[1:]:
    node = cst.Attribute(value=node, attr=cst.Name(part))
  return node


def _expression_statement(expr: cst.BaseExpression) -> cst.SimpleStatementLine:
  return cst.SimpleStatementLine(body=[cst.Expr(value=expr)])


def flatten_statements(items: Iterable[Lowered], depth: int = 0) -> List[cst.BaseStatement]:
  """
  Converts a lowered statement sequence into a flat list of LibCST statements.

  Nested blocks and multi-statement results (declarations) are spliced in;
  resolved suspensions are rendered; empty statements are dropped.

  Args:
      items: Lowered statements, possibly nested.
      depth: Suspension nesting depth.

  Returns:
      List[cst.BaseStatement]: Statements ready for a suite or module body.
  """
  out: List[cst.BaseStatement] = []
  for item in items:
    if item is None:
      continue
    if isinstance(item, cst.IndentedBlock):
      out.extend(item.body)
    elif isinstance(item, (list, tuple)):
      out.extend(flatten_statements(item, depth))
    elif isinstance(item, Suspending):
      body = flatten_statements(item.continuation or (), depth + 1) if not item.pending else []
      out.extend(render_suspension(item, body, depth))
    else:
      out.append(item)
  return out


def as_suite(item: Lowered) -> cst.IndentedBlock:
  """
  Coerces a lowered statement into an indented suite, substituting `pass` for
  an absent statement.
  """
  if isinstance(item, cst.IndentedBlock):
    return item
  return cst.IndentedBlock(body=flatten_statements(expand_continuations((item,))) or [empty_statement()])


class TinyLowering:
  """
  Registry of lowering rules, one `leave_<Tag>` method per Tiny node variant.

  Subclasses may override individual rules (for instance to return a
  `Suspending` statement); `dispatch` always resolves by tag.

  Args:
      config (RuntimeConfig, optional): Naming and formatting options.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    self.config = config or RuntimeConfig()

  @classmethod
  def registered_tags(cls) -> List[str]:
    """Tags with a lowering rule on this class."""
    return sorted(name[len("leave_") :] for name in dir(cls) if name.startswith("leave_"))

  def dispatch(self, node: TinyNode) -> Any:
    """
    Applies the rule registered for `node`'s tag.

    Raises:
        UnknownNodeType: If no rule exists for the tag.
    """
    rule = getattr(self, f"leave_{node.tag}", None)
    if rule is None:
      raise UnknownNodeType(node.tag)
    logger.debug("Lowering %s", node.tag)
    return rule(node)

  def runtime_attribute(self, name: str) -> cst.Attribute:
    return cst.Attribute(value=cst.Name(RUNTIME_NAME), attr=cst.Name(name))

  def runtime_import(self) -> cst.SimpleStatementLine:
    """`import <runtime_module> as runtime`."""
    alias = cst.ImportAlias(
      name=_dotted(self.config.runtime_module),
      asname=cst.AsName(name=cst.Name(RUNTIME_NAME)),
    )
    return cst.SimpleStatementLine(body=[cst.Import(names=[alias])])

  # --- Program structure ---

  def leave_Tiny(self, node: Tiny) -> cst.Module:
    body: List[cst.BaseStatement] = [self.runtime_import()]
    body.extend(flatten_statements(node.declarations))
    body.extend(flatten_statements(expand_continuations((node.body,))))
    return cst.Module(body=body, default_indent=self.config.indent)

  def leave_Declaration(self, node: Declaration) -> tuple:
    try:
      default = DEFAULT_VALUES[ValueType(node.value_type)]
    except ValueError:
      raise UnknownValueType(str(node.value_type)) from None
    # Type information is discarded from here on
    return tuple(
      cst.SimpleStatementLine(body=[cst.Assign(targets=[cst.AssignTarget(target=name)], value=default())])
      for name in node.ids
    )

  def leave_BlockStatement(self, node: BlockStatement) -> cst.IndentedBlock:
    return cst.IndentedBlock(body=flatten_statements(expand_continuations(node.body)))

  # --- Expressions ---

  def leave_Identifier(self, node: Identifier) -> cst.Name:
    return cst.Name(self.config.identifier_prefix + node.name)

  def leave_Literal(self, node: Literal) -> cst.BaseExpression:
    value = node.value
    if isinstance(value, bool):
      return cst.Name("True" if value else "False")
    if isinstance(value, int):
      if value < 0:
        return cst.UnaryOperation(operator=cst.Minus(), expression=cst.Integer(str(-value)))
      return cst.Integer(str(value))
    if isinstance(value, float):
      return cst.Float(repr(value))
    return cst.SimpleString(repr(value))

  def leave_ReadExpression(self, node: ReadExpression) -> cst.Call:
    return cst.Call(func=self.runtime_attribute("read"))

  def leave_UnaryExpression(self, node: UnaryExpression) -> cst.UnaryOperation:
    return build_unary(node.operator, node.argument)

  def leave_BinaryExpression(self, node: BinaryExpression) -> cst.BaseExpression:
    return build_binary(node.operator, node.left, node.right)

  # --- Statements ---

  def leave_AssignmentStatement(self, node: AssignmentStatement) -> cst.SimpleStatementLine:
    return cst.SimpleStatementLine(body=[cst.Assign(targets=[cst.AssignTarget(target=node.left)], value=node.right)])

  def leave_OutputStatement(self, node: OutputStatement) -> cst.SimpleStatementLine:
    return _expression_statement(cst.Call(func=self.runtime_attribute("output"), args=[cst.Arg(value=node.value)]))

  def leave_WhileStatement(self, node: WhileStatement) -> cst.While:
    return cst.While(test=node.test, body=as_suite(node.body))

  def leave_IfStatement(self, node: IfStatement) -> cst.If:
    alternate = node.alternate
    if isinstance(alternate, cst.If):
      orelse: Union[cst.If, cst.Else] = alternate
    else:
      orelse = cst.Else(body=as_suite(alternate))
    return cst.If(test=node.test, body=as_suite(node.consequent), orelse=orelse)


_MISSING_RULES = sorted(set(NODE_TYPES) - set(TinyLowering.registered_tags()))
if _MISSING_RULES:
  raise TypeError(f"TinyLowering lacks rules for: {', '.join(_MISSING_RULES)}")
