"""
Tiny Source Nodes.

This module defines the data structures of the Tiny source AST. Each node
variant is a frozen dataclass deriving from `TinyNode`; the variant tag is the
class name.

Classes match the closed tag set:
    - Tiny                -> program root
    - Declaration         -> `var a, b: integer;`
    - BlockStatement      -> `begin ... end`
    - Identifier          -> `a`
    - Literal             -> `1`, `true`
    - AssignmentStatement -> `a := e`
    - ReadExpression      -> `read`
    - OutputStatement     -> `output e`
    - UnaryExpression     -> `-e`, `!e`
    - BinaryExpression    -> `e + e`
    - WhileStatement      -> `while e do s`
    - IfStatement         -> `if e then s else s`

Sequences are stored as tuples so trees are immutable end to end.
`from_dict` / `to_dict` convert to and from the JSON shape
(`{"type": "Identifier", "name": "x"}`) used by the `parse` command.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple, Type, Union

from tinyc.enums import ValueType
from tinyc.errors import UnknownNodeType


@dataclass(frozen=True)
class SourceLocation:
  """Start position of a node in the Tiny source (1-based)."""

  line: int
  column: int


@dataclass(frozen=True)
class TinyNode:
  """
  Abstract base class for all Tiny source nodes.

  Attributes:
      location: Optional source position, ignored by equality.
  """

  location: Optional[SourceLocation] = field(default=None, compare=False, kw_only=True)

  @property
  def tag(self) -> str:
    """The variant tag (the class name)."""
    return type(self).__name__


@dataclass(frozen=True)
class Identifier(TinyNode):
  name: str


@dataclass(frozen=True)
class Literal(TinyNode):
  value: Union[int, bool]


@dataclass(frozen=True)
class ReadExpression(TinyNode):
  pass


@dataclass(frozen=True)
class UnaryExpression(TinyNode):
  operator: str
  argument: TinyNode


@dataclass(frozen=True)
class BinaryExpression(TinyNode):
  operator: str
  left: TinyNode
  right: TinyNode


@dataclass(frozen=True)
class AssignmentStatement(TinyNode):
  left: Identifier
  right: TinyNode


@dataclass(frozen=True)
class OutputStatement(TinyNode):
  value: TinyNode


@dataclass(frozen=True)
class BlockStatement(TinyNode):
  body: Tuple[TinyNode, ...] = ()


@dataclass(frozen=True)
class WhileStatement(TinyNode):
  test: TinyNode
  body: Optional[TinyNode] = None


@dataclass(frozen=True)
class IfStatement(TinyNode):
  """
  Conditional statement. Either branch may be absent (`if c then else s`);
  lowering always materializes both.
  """

  test: TinyNode
  consequent: Optional[TinyNode] = None
  alternate: Optional[TinyNode] = None


@dataclass(frozen=True)
class Declaration(TinyNode):
  """
  Variable declaration: `var a, b: integer;`.

  `value_type` is normally a `ValueType`; trees loaded from JSON may carry any
  string, which lowering rejects.
  """

  ids: Tuple[Identifier, ...]
  value_type: Union[ValueType, str] = ValueType.INTEGER


@dataclass(frozen=True)
class Tiny(TinyNode):
  """Program root: declarations followed by the main block."""

  declarations: Tuple[Declaration, ...]
  body: BlockStatement


NODE_CLASSES: Dict[str, Type[TinyNode]] = {
  cls.__name__: cls
  for cls in (
    Tiny,
    Declaration,
    BlockStatement,
    Identifier,
    Literal,
    AssignmentStatement,
    ReadExpression,
    OutputStatement,
    UnaryExpression,
    BinaryExpression,
    WhileStatement,
    IfStatement,
  )
}

NODE_TYPES: Tuple[str, ...] = tuple(NODE_CLASSES)

# JSON keys that differ from dataclass field names
_JSON_KEYS = {"value_type": "valueType"}
_FIELD_NAMES = {v: k for k, v in _JSON_KEYS.items()}


def from_dict(data: Any) -> Any:
  """
  Hydrates node dataclasses from their JSON-compatible shape.

  Lists become tuples. Dicts without a `type` key and scalars pass through.

  Args:
      data: Decoded JSON value.

  Returns:
      The equivalent node tree.

  Raises:
      UnknownNodeType: If a dict carries a `type` outside the closed tag set.
  """
  if isinstance(data, list):
    return tuple(from_dict(el) for el in data)
  if not isinstance(data, dict) or "type" not in data:
    return data

  tag = data["type"]
  cls = NODE_CLASSES.get(tag)
  if cls is None:
    raise UnknownNodeType(tag)

  kwargs: Dict[str, Any] = {}
  for key, value in data.items():
    if key == "type":
      continue
    if key == "location":
      kwargs["location"] = SourceLocation(**value) if value else None
      continue
    kwargs[_FIELD_NAMES.get(key, key)] = from_dict(value)
  return cls(**kwargs)


def to_dict(node: Any, include_location: bool = False) -> Any:
  """
  Serializes a node tree into its JSON-compatible shape.

  Args:
      node: Node, tuple of nodes or scalar.
      include_location (bool): Emit `location` objects for located nodes.

  Returns:
      Nested dicts/lists ready for `json.dumps`.
  """
  if isinstance(node, (list, tuple)):
    return [to_dict(el, include_location) for el in node]
  if isinstance(node, ValueType):
    return node.value
  if not isinstance(node, TinyNode):
    return node

  result: Dict[str, Any] = {"type": node.tag}
  for f in fields(node):
    if f.name == "location":
      continue
    result[_JSON_KEYS.get(f.name, f.name)] = to_dict(getattr(node, f.name), include_location)
  if include_location and node.location is not None:
    result["location"] = {"line": node.location.line, "column": node.location.column}
  return result
