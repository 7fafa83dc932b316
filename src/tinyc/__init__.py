"""
tinyc Package.

A compiler from the Tiny teaching language to Python, built as a tree rewrite
from the Tiny source AST to a LibCST tree.

Usage
-----

Simple String Compilation
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import tinyc
    code = "var x: integer; begin x := 1; output x end"
    print(tinyc.compile_source(code))
    # import tinyc.runtime as runtime
    # tiny_x = 0
    # tiny_x = 1
    # runtime.output(tiny_x)

Tree-Level Usage
^^^^^^^^^^^^^^^^

.. code-block:: python

    from tinyc import parse, transform

    module = transform(parse(code))
    print(module.code)
"""

from typing import Optional

from tinyc.config import RuntimeConfig
from tinyc.core.engine import TinyEngine, transform
from tinyc.errors import TinySyntaxError, TransformError, UnknownNodeType
from tinyc.syntax.parser import parse

__version__ = "0.0.1"


def compile_source(code: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Compiles Tiny source text into Python source text.

  Args:
      code (str): The Tiny program.
      config (RuntimeConfig, optional): Naming and formatting options.

  Returns:
      str: The generated Python program.

  Raises:
      TinySyntaxError: If the program does not parse.
      TransformError: If the tree cannot be lowered.
  """
  return TinyEngine(config=config).compile(code)


__all__ = [
  "RuntimeConfig",
  "TinyEngine",
  "TinySyntaxError",
  "TransformError",
  "UnknownNodeType",
  "compile_source",
  "parse",
  "transform",
  "__version__",
]
