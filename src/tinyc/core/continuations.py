"""
Continuation Expansion.

Converts a flat statement sequence containing a suspending statement into
nested continuation form: the suspension takes ownership of every statement
after it, and the sequence ends at the suspension.

A `Suspending` statement with `continuation=None` is *pending*. Expansion
attaches the (recursively expanded) remainder and thereby resolves it, which
makes expansion idempotent. Rendering a resolved suspension produces a nested
callback function holding the continuation, passed as the final argument of
the suspending call:

.. code-block:: python

    def _tiny_resume_0():
        global tiny_x
        tiny_x = 1
    runtime.some_async_call(arg, _tiny_resume_0)

No built-in lowering rule emits a `Suspending` yet; subclasses of
`TinyLowering` may return one from any statement rule.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence, Tuple

import libcst as cst

from tinyc.config import RESUME_PREFIX
from tinyc.errors import UnresolvedSuspension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suspending:
  """
  A statement that must wait for an external event before its sequence resumes.

  Attributes:
      call: The call performing the suspending operation.
      continuation: Statements to run on resumption; None while pending.
  """

  call: cst.Call
  continuation: Optional[Tuple[Any, ...]] = None

  @property
  def pending(self) -> bool:
    return self.continuation is None


def expand_continuations(body: Sequence[Any]) -> Tuple[Any, ...]:
  """
  Moves everything after the first pending suspension into its continuation.

  Args:
      body: A statement sequence, at most one element of which is pending.

  Returns:
      The sequence unchanged if nothing is pending; otherwise the prefix up to
      and including the resolved suspension.
  """
  items = tuple(body)
  for i, item in enumerate(items):
    if isinstance(item, Suspending) and item.pending:
      logger.debug("Expanding suspension at position %d of %d", i, len(items))
      resolved = replace(item, continuation=expand_continuations(items[i + 1 :]))
      return items[:i] + (resolved,)
  return items


class _AssignedNames(cst.CSTVisitor):
  """Collects the names bound by plain assignments."""

  def __init__(self) -> None:
    self.names: List[str] = []

  def visit_AssignTarget(self, node: cst.AssignTarget) -> None:
    if isinstance(node.target, cst.Name) and node.target.value not in self.names:
      self.names.append(node.target.value)


def assigned_names(statements: Sequence[cst.BaseStatement]) -> List[str]:
  """
  Lists the names assigned anywhere in `statements`, in first-seen order.
  """
  collector = _AssignedNames()
  for stmt in statements:
    stmt.visit(collector)
  return collector.names


def render_suspension(node: Suspending, body: List[cst.BaseStatement], depth: int) -> List[cst.BaseStatement]:
  """
  Renders a resolved suspension as a callback definition plus the call.

  Args:
      node: The resolved suspension.
      body: The continuation, already rendered as statements.
      depth: Suspension nesting depth, used to name the callback.

  Returns:
      The two statements replacing the suspension.

  Raises:
      UnresolvedSuspension: If `node` is still pending.
  """
  if node.pending:
    raise UnresolvedSuspension()

  name = f"{RESUME_PREFIX}{depth}"
  prologue: List[cst.BaseStatement] = []
  names = assigned_names(body)
  if names:
    prologue.append(
      cst.SimpleStatementLine(body=[cst.Global(names=[cst.NameItem(name=cst.Name(n)) for n in names])])
    )

  callback = cst.FunctionDef(
    name=cst.Name(name),
    params=cst.Parameters(),
    body=cst.IndentedBlock(body=prologue + body),
  )
  call = node.call.with_changes(args=[*node.call.args, cst.Arg(value=cst.Name(name))])
  return [callback, cst.SimpleStatementLine(body=[cst.Expr(value=call)])]
