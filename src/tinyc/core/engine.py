"""
Transform Driver and Compilation Engine.

`transform` is the single public operation of the tree-rewrite core: it runs
the generic walker over a Tiny source tree with the lowering registry as the
rewrite function and returns the LibCST tree of the equivalent Python program.
It fails fast: the first `TransformError` aborts the whole transform and no
partial tree is returned.

`TinyEngine` wraps the driver with the parser and the LibCST renderer for
callers that want a reportable `CompileResult` rather than exceptions.

The Engine pipeline consists of:

1.  **Parsing**: Tiny source text -> `Tiny` node tree (`tinyc.syntax`).
2.  **Lowering**: `transform` (walker + `TinyLowering` + continuation expansion).
3.  **Rendering**: `cst.Module.code`.
"""

import logging
from typing import Any, Optional

import libcst as cst

from tinyc.config import RuntimeConfig
from tinyc.core.compile_result import CompileResult
from tinyc.core.lowering import TinyLowering
from tinyc.core.walker import traverse
from tinyc.errors import TinyError
from tinyc.syntax.nodes import Tiny, TinyNode
from tinyc.syntax.parser import parse

logger = logging.getLogger(__name__)


def transform(
  tree: TinyNode,
  config: Optional[RuntimeConfig] = None,
  lowering: Optional[TinyLowering] = None,
) -> Any:
  """
  Lowers a Tiny source tree into a LibCST tree.

  Args:
      tree (TinyNode): Source tree; any node variant is accepted, a `Tiny`
          root yields a complete `cst.Module`.
      config (RuntimeConfig, optional): Naming and formatting options. Ignored
          when `lowering` is given.
      lowering (TinyLowering, optional): Rule registry to use instead of the
          default one.

  Returns:
      The lowered tree.

  Raises:
      UnknownNodeType: If a node's tag has no rule.
      TransformError: For any other lowering failure.
  """
  rules = lowering or TinyLowering(config)
  return traverse(tree, rules.dispatch)


class TinyEngine:
  """
  The main compilation unit.

  Coordinates parsing, lowering and rendering for a single Tiny program.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, lowering: Optional[TinyLowering] = None):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): The runtime configuration object.
        lowering (TinyLowering, optional): Custom rule registry.
    """
    self.config = config or RuntimeConfig()
    self.lowering = lowering or TinyLowering(self.config)

  def parse(self, code: str, location: bool = False) -> Tiny:
    """
    Parses Tiny source into a node tree.

    Raises:
        TinySyntaxError: If the source is malformed.
    """
    return parse(code, location=location)

  def transform(self, tree: TinyNode) -> cst.Module:
    return transform(tree, lowering=self.lowering)

  def to_source(self, tree: cst.Module) -> str:
    """
    Converts the lowered tree to Python source.

    Args:
        tree (cst.Module): The lowered program.

    Returns:
        str: Generated Python code.
    """
    return tree.code

  def compile(self, code: str) -> str:
    """
    Parses, lowers and renders `code`, letting every error propagate.
    """
    return self.to_source(self.transform(self.parse(code)))

  def run(self, code: str) -> CompileResult:
    """
    Executes the full pipeline, reporting failures instead of raising them.

    Args:
        code (str): Tiny source text.

    Returns:
        CompileResult: Generated code, or the error that stopped the pipeline.
    """
    try:
      generated = self.compile(code)
    except TinyError as e:
      logger.debug("Compilation failed: %s", e)
      return CompileResult.failed(e)
    return CompileResult(code=generated)
