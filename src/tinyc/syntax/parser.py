"""
Tiny Recursive Descent Parser.

This module parses Tiny source text into the node dataclasses defined in
`nodes.py`. Expressions are parsed by precedence climbing over
`_BINARY_LEVELS`; statements and declarations by plain recursive descent.

Syntax errors raise `TinySyntaxError` with the 1-based line and column of the
offending token.
"""

import re
from typing import Generator, List, Optional, Tuple

from tinyc.enums import ValueType
from tinyc.errors import TinySyntaxError
from tinyc.syntax.nodes import (
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
)
from tinyc.syntax.tokens import KEYWORDS, Keyword, Token, TokenKind

# Loosest binding first
_BINARY_LEVELS: Tuple[Tuple[str, ...], ...] = (
  ("||",),
  ("&&",),
  ("==", "!="),
  ("<", "<=", ">", ">="),
  ("+", "-"),
  ("*", "/", "%"),
)

_UNARY_OPERATORS = ("-", "+", "!")


class Tokenizer:
  PATTERN_DEFS = [
    (TokenKind.COMMENT, r"//[^\n]*"),
    (TokenKind.IDENTIFIER, r"[A-Za-z_][A-Za-z0-9_]*"),
    (TokenKind.NUMBER, r"\d+"),
    (TokenKind.ASSIGN, r":="),
    (TokenKind.OPERATOR, r"\|\||&&|==|!=|<=|>=|[<>+\-*/%!]"),
    (TokenKind.SYMBOL, r"[(),:;]"),
    (TokenKind.NEWLINE, r"\n"),
    (TokenKind.WHITESPACE, r"[ \t\r]+"),
    (TokenKind.MISMATCH, r"."),
  ]

  _REGEX = re.compile("|".join(f"(?P<{kind.value}>{pattern})" for kind, pattern in PATTERN_DEFS))

  def __init__(self, text: str):
    self.text = text

  def tokenize(self) -> Generator[Token, None, None]:
    """
    Yields significant tokens; whitespace, newlines and comments are dropped.

    Raises:
        TinySyntaxError: On a character that starts no token.
    """
    line_num = 1
    line_start = 0
    for mo in self._REGEX.finditer(self.text):
      kind = TokenKind(mo.lastgroup)
      value = mo.group()
      col = mo.start() - line_start + 1

      if kind == TokenKind.NEWLINE:
        line_num += 1
        line_start = mo.end()
      elif kind == TokenKind.MISMATCH:
        raise TinySyntaxError(f"Unexpected character {value!r}", line_num, col, found=value)
      elif kind == TokenKind.IDENTIFIER and value in KEYWORDS:
        yield Token(TokenKind.KEYWORD, value, line_num, col)
      elif kind not in (TokenKind.WHITESPACE, TokenKind.COMMENT):
        yield Token(kind, value, line_num, col)
    yield Token(TokenKind.EOF, "", line_num, len(self.text) - line_start + 1)


class TinyParser:
  """
  Parses Tiny source into a `Tiny` program node.

  Args:
      text (str): Tiny source code.
      location (bool): Attach `SourceLocation` metadata to every node.
  """

  def __init__(self, text: str, location: bool = False):
    self.tokens: List[Token] = list(Tokenizer(text).tokenize())
    self.pos = 0
    self.with_location = location

  def peek(self, offset: int = 0) -> Token:
    idx = self.pos + offset
    if idx >= len(self.tokens):
      return self.tokens[-1]
    return self.tokens[idx]

  def consume(self) -> Token:
    token = self.peek()
    self.pos += 1
    return token

  def match(self, text: str, kind: Optional[TokenKind] = None) -> bool:
    tk = self.peek()
    if kind is not None and tk.kind != kind:
      return False
    return tk.text == text and tk.kind != TokenKind.EOF

  def expect(self, text: str) -> Token:
    if not self.match(text):
      self._fail(f"Expected '{getattr(text, 'value', text)}'")
    return self.consume()

  def _fail(self, message: str) -> None:
    tk = self.peek()
    found = "end of input" if tk.kind == TokenKind.EOF else f"'{tk.text}'"
    raise TinySyntaxError(f"{message}, found {found}", tk.line, tk.col, found=tk.text)

  def _loc(self, token: Token) -> Optional[SourceLocation]:
    if not self.with_location:
      return None
    return SourceLocation(line=token.line, column=token.col)

  def parse(self) -> Tiny:
    """
    Parses the whole token stream.

    Returns:
        Tiny: The program root.
    """
    start = self.peek()
    declarations = []
    while self.match(Keyword.VAR, TokenKind.KEYWORD):
      declarations.append(self.parse_declaration())
    body = self.parse_block()
    if self.peek().kind != TokenKind.EOF:
      self._fail("Expected end of input")
    return Tiny(declarations=tuple(declarations), body=body, location=self._loc(start))

  def parse_declaration(self) -> Declaration:
    start = self.expect(Keyword.VAR)
    ids = [self.parse_identifier()]
    while self.match(","):
      self.consume()
      ids.append(self.parse_identifier())
    self.expect(":")
    type_token = self.peek()
    if type_token.kind != TokenKind.KEYWORD or type_token.text not in (Keyword.INTEGER, Keyword.BOOLEAN):
      self._fail("Expected a type ('integer' or 'boolean')")
    self.consume()
    self.expect(";")
    return Declaration(ids=tuple(ids), value_type=ValueType(type_token.text), location=self._loc(start))

  def parse_identifier(self) -> Identifier:
    tk = self.peek()
    if tk.kind != TokenKind.IDENTIFIER:
      self._fail("Expected an identifier")
    self.consume()
    return Identifier(tk.text, location=self._loc(tk))

  def parse_block(self) -> BlockStatement:
    start = self.expect(Keyword.BEGIN)
    statements = []
    while True:
      stmt = self.parse_statement()
      if stmt is not None:
        statements.append(stmt)
      if self.match(";"):
        self.consume()
        continue
      break
    self.expect(Keyword.END)
    return BlockStatement(body=tuple(statements), location=self._loc(start))

  def parse_statement(self) -> Optional[TinyNode]:
    """
    Parses one statement, or returns None for the empty statement.
    """
    tk = self.peek()
    if tk.kind == TokenKind.KEYWORD:
      if tk.text == Keyword.BEGIN:
        return self.parse_block()
      if tk.text == Keyword.OUTPUT:
        self.consume()
        return OutputStatement(self.parse_expression(), location=self._loc(tk))
      if tk.text == Keyword.WHILE:
        self.consume()
        test = self.parse_expression()
        self.expect(Keyword.DO)
        return WhileStatement(test, self.parse_statement(), location=self._loc(tk))
      if tk.text == Keyword.IF:
        return self.parse_if()
      return None
    if tk.kind == TokenKind.IDENTIFIER:
      left = self.parse_identifier()
      if not self.match(":=", TokenKind.ASSIGN):
        self._fail("Expected ':='")
      self.consume()
      return AssignmentStatement(left, self.parse_expression(), location=self._loc(tk))
    if tk.kind == TokenKind.EOF or tk.text == ";":
      return None
    self._fail("Expected a statement")

  def parse_if(self) -> IfStatement:
    start = self.expect(Keyword.IF)
    test = self.parse_expression()
    self.expect(Keyword.THEN)
    consequent = self.parse_statement()
    alternate = None
    if self.match(Keyword.ELSE, TokenKind.KEYWORD):
      self.consume()
      alternate = self.parse_statement()
    return IfStatement(test, consequent, alternate, location=self._loc(start))

  def parse_expression(self, level: int = 0) -> TinyNode:
    if level == len(_BINARY_LEVELS):
      return self.parse_unary()
    left = self.parse_expression(level + 1)
    while self.peek().kind == TokenKind.OPERATOR and self.peek().text in _BINARY_LEVELS[level]:
      op = self.consume()
      right = self.parse_expression(level + 1)
      left = BinaryExpression(op.text, left, right, location=self._loc(op))
    return left

  def parse_unary(self) -> TinyNode:
    tk = self.peek()
    if tk.kind == TokenKind.OPERATOR and tk.text in _UNARY_OPERATORS:
      self.consume()
      return UnaryExpression(tk.text, self.parse_unary(), location=self._loc(tk))
    return self.parse_primary()

  def parse_primary(self) -> TinyNode:
    tk = self.peek()
    if tk.kind == TokenKind.NUMBER:
      self.consume()
      return Literal(int(tk.text), location=self._loc(tk))
    if tk.kind == TokenKind.KEYWORD and tk.text in (Keyword.TRUE, Keyword.FALSE):
      self.consume()
      return Literal(tk.text == Keyword.TRUE, location=self._loc(tk))
    if tk.kind == TokenKind.KEYWORD and tk.text == Keyword.READ:
      self.consume()
      return ReadExpression(location=self._loc(tk))
    if tk.kind == TokenKind.IDENTIFIER:
      return self.parse_identifier()
    if self.match("(", TokenKind.SYMBOL):
      self.consume()
      expr = self.parse_expression()
      self.expect(")")
      return expr
    self._fail("Expected an expression")


def parse(text: str, location: bool = False) -> Tiny:
  """
  Parses Tiny source text.

  Args:
      text (str): Tiny source code.
      location (bool): Include location metadata in the tree.

  Returns:
      Tiny: The program root.

  Raises:
      TinySyntaxError: If the source is malformed.
  """
  return TinyParser(text, location=location).parse()
