"""
Tiny Source Syntax Package.

Node dataclasses for the Tiny source AST, the tokenizer and recursive descent
parser producing them, and the JSON loader/dumper used to exchange trees with
external tools.
"""

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
  SourceLocation,
  Tiny,
  TinyNode,
  UnaryExpression,
  WhileStatement,
  from_dict,
  to_dict,
)
from tinyc.syntax.parser import TinyParser, parse

__all__ = [
  "NODE_TYPES",
  "AssignmentStatement",
  "BinaryExpression",
  "BlockStatement",
  "Declaration",
  "Identifier",
  "IfStatement",
  "Literal",
  "OutputStatement",
  "ReadExpression",
  "SourceLocation",
  "Tiny",
  "TinyNode",
  "TinyParser",
  "UnaryExpression",
  "WhileStatement",
  "from_dict",
  "parse",
  "to_dict",
]
