"""
Tiny Token Definitions.

Defines the enumerations for Token Kinds and reserved words used by the
Tokenizer and Parser.
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
  """Enumeration of Lexer Token Types."""

  COMMENT = "COMMENT"
  KEYWORD = "KEYWORD"
  IDENTIFIER = "IDENTIFIER"
  NUMBER = "NUMBER"
  ASSIGN = "ASSIGN"
  OPERATOR = "OPERATOR"
  SYMBOL = "SYMBOL"
  NEWLINE = "NEWLINE"
  WHITESPACE = "WHITESPACE"
  MISMATCH = "MISMATCH"
  EOF = "EOF"


class Keyword(str, Enum):
  """Reserved words of the Tiny language."""

  VAR = "var"
  BEGIN = "begin"
  END = "end"
  IF = "if"
  THEN = "then"
  ELSE = "else"
  WHILE = "while"
  DO = "do"
  OUTPUT = "output"
  READ = "read"
  TRUE = "true"
  FALSE = "false"
  INTEGER = "integer"
  BOOLEAN = "boolean"


KEYWORDS = frozenset(k.value for k in Keyword)


@dataclass(frozen=True)
class Token:
  """A lexical unit."""

  kind: TokenKind
  text: str
  line: int
  col: int
