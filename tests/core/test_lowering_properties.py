"""
Property tests for expression lowering.

Random expression trees are lowered, rendered and evaluated; the result must
match evaluating the tree directly, so rendering never regroups operands.
"""

import copy
import operator

import libcst as cst
from hypothesis import given, settings, strategies as st

from tinyc.core.engine import transform
from tinyc.core.walker import traverse
from tinyc.syntax.nodes import BinaryExpression, Literal, UnaryExpression

BINARY_SEMANTICS = {
  "+": operator.add,
  "-": operator.sub,
  "*": operator.mul,
  "<": operator.lt,
  "<=": operator.le,
  ">": operator.gt,
  ">=": operator.ge,
  "==": operator.eq,
  "!=": operator.ne,
  "&&": lambda a, b: a and b,
  "||": lambda a, b: a or b,
}

UNARY_SEMANTICS = {
  "-": operator.neg,
  "+": operator.pos,
  "!": operator.not_,
}

leaves = st.one_of(
  st.integers(min_value=-50, max_value=50).map(Literal),
  st.booleans().map(Literal),
)


def _extend(children):
  return st.one_of(
    st.builds(BinaryExpression, st.sampled_from(sorted(BINARY_SEMANTICS)), children, children),
    st.builds(UnaryExpression, st.sampled_from(sorted(UNARY_SEMANTICS)), children),
  )


expressions = st.recursive(leaves, _extend, max_leaves=12)


def evaluate(node):
  """Reference semantics computed straight from the tree."""
  if isinstance(node, Literal):
    return node.value
  if isinstance(node, UnaryExpression):
    return UNARY_SEMANTICS[node.operator](evaluate(node.argument))
  return BINARY_SEMANTICS[node.operator](evaluate(node.left), evaluate(node.right))


@given(tree=expressions)
@settings(max_examples=200)
def test_rendered_expression_matches_tree(tree):
  code = cst.Module(body=[]).code_for_node(transform(tree))
  assert eval(code) == evaluate(tree)


@given(tree=expressions)
@settings(max_examples=50)
def test_lowering_never_mutates_input(tree):
  snapshot = copy.deepcopy(tree)
  transform(tree)
  assert tree == snapshot


@given(tree=expressions)
@settings(max_examples=50)
def test_identity_walk_preserves_tree(tree):
  assert traverse(tree, lambda n: n) == tree
