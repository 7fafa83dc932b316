"""
Generic Tree Walker.

Structural, tag-agnostic post-order traversal over the Tiny source tree. The
walker knows nothing about individual node variants: it recurses through
sequences and `TinyNode` fields, rebuilds each node with its rewritten
children, and hands the rebuilt node to `rewrite`.
"""

from dataclasses import fields, replace
from typing import Any, Callable

from tinyc.syntax.nodes import TinyNode

Rewrite = Callable[[TinyNode], Any]


def traverse(node: Any, rewrite: Rewrite) -> Any:
  """
  Applies `rewrite` to every tagged sub-node of `node`, children first.

  - Lists and tuples yield a new sequence of the same type and length.
  - `TinyNode` instances are rebuilt (never mutated) with every field
    replaced by its traversal, then passed to `rewrite`.
  - Anything else (scalars, None, enums, untagged containers) is returned
    unchanged and not recursed into.

  Args:
      node: The tree, or any value inside it.
      rewrite: Rule applied to each rebuilt node.

  Returns:
      The rewritten value.
  """
  if isinstance(node, (list, tuple)):
    return type(node)(traverse(el, rewrite) for el in node)

  if not isinstance(node, TinyNode):
    return node

  children = {f.name: traverse(getattr(node, f.name), rewrite) for f in fields(node)}
  return rewrite(replace(node, **children))
