"""
Tree-rewrite core: walker, lowering registry, continuation expansion and the
transform driver.
"""

from tinyc.core.compile_result import CompileResult
from tinyc.core.continuations import Suspending, expand_continuations
from tinyc.core.engine import TinyEngine, transform
from tinyc.core.lowering import TinyLowering
from tinyc.core.walker import traverse

__all__ = [
  "CompileResult",
  "Suspending",
  "TinyEngine",
  "TinyLowering",
  "expand_continuations",
  "transform",
  "traverse",
]
