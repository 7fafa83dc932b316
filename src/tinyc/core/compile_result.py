"""
Outcome of compiling one Tiny program.

`TinyEngine.run` returns a `CompileResult` instead of raising, so the CLI can
report failures uniformly. Syntax errors keep their source position.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from tinyc.errors import TinyError, TinySyntaxError


class CompileResult(BaseModel):
  """
  Generated Python source, or the error that stopped the pipeline.
  """

  code: str = Field(default="", description="Generated Python source; empty on failure.")
  errors: List[str] = Field(default_factory=list, description="Messages of the errors that stopped compilation.")
  line: Optional[int] = Field(default=None, description="1-based line of a syntax error.")
  column: Optional[int] = Field(default=None, description="1-based column of a syntax error.")

  @property
  def success(self) -> bool:
    return not self.errors

  @classmethod
  def failed(cls, error: TinyError) -> "CompileResult":
    """
    Builds a failed result from a pipeline error.

    Args:
        error (TinyError): The error raised by parsing or lowering.

    Returns:
        CompileResult: A result with no code, carrying the message and, for
            syntax errors, the offending position.
    """
    if isinstance(error, TinySyntaxError):
      return cls(errors=[str(error)], line=error.line, column=error.column)
    return cls(errors=[str(error)])
