"""
Runtime Configuration Store.

Settings controlling the shape of generated Python code. Values come from the
`[tool.tinyc]` table of the nearest `pyproject.toml`, overridden by explicit
arguments (e.g. from the CLI).
"""

import builtins
import keyword
import sys
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from rich.markup import escape

from tinyc.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

# Names bound by generated code itself
RUNTIME_NAME = "runtime"
RESUME_PREFIX = "_tiny_resume_"

RESERVED_NAMES: FrozenSet[str] = frozenset(
  [*keyword.kwlist, *dir(builtins), RUNTIME_NAME, RESUME_PREFIX]
)


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the lowering engine.
  """

  identifier_prefix: str = Field("tiny_", description="Namespace token prepended to every Tiny identifier.")
  runtime_module: str = Field("tinyc.runtime", description="Module imported as `runtime` by generated code.")
  indent_width: int = Field(4, ge=1, le=8, description="Spaces per indentation level in generated code.")

  @field_validator("identifier_prefix")
  @classmethod
  def validate_prefix(cls, v: str) -> str:
    """
    Ensures prefixed names are always legal Python identifiers that cannot
    spell a keyword, a builtin, or a name bound by generated code.

    Args:
        v (str): The candidate prefix.

    Returns:
        str: The prefix, unchanged.

    Raises:
        ValueError: If `v` is empty, not an identifier start, or a prefix of
            any name in `RESERVED_NAMES`.
    """
    if not v or not (v + "x").isidentifier():
      raise ValueError(f"Invalid identifier prefix: '{v}'")
    clashes = sorted(name for name in RESERVED_NAMES if name.startswith(v))
    if clashes:
      raise ValueError(f"Identifier prefix '{v}' can spell reserved name '{clashes[0]}'")
    return v

  @field_validator("runtime_module")
  @classmethod
  def validate_module(cls, v: str) -> str:
    parts = v.strip().split(".")
    if not all(p.isidentifier() and not keyword.iskeyword(p) for p in parts):
      raise ValueError(f"Invalid runtime module path: '{v}'")
    return v.strip()

  @property
  def indent(self) -> str:
    """The indentation string used by the code generator."""
    return " " * self.indent_width

  @classmethod
  def load(
    cls,
    search_path: Optional[Path] = None,
    identifier_prefix: Optional[str] = None,
    runtime_module: Optional[str] = None,
    indent_width: Optional[int] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        identifier_prefix (Optional[str]): Override for the identifier prefix.
        runtime_module (Optional[str]): Override for the runtime module.
        indent_width (Optional[int]): Override for the indentation width.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, found_in = _load_toml_settings(search_path or Path.cwd())

    unknown = sorted(k for k in toml_config if k not in cls.model_fields)
    if unknown:
      log_warning(escape(f"Ignoring unknown [tool.tinyc] keys ({', '.join(unknown)}) in {found_in / 'pyproject.toml'}"))

    overrides = {
      "identifier_prefix": identifier_prefix,
      "runtime_module": runtime_module,
      "indent_width": indent_width,
    }
    merged: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields}
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return cls(**merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  An unreadable or malformed file is reported and treated as empty.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The `[tool.tinyc]` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        log_warning(escape(f"Ignoring unreadable {toml_path}: {e}"))
        return {}, None
      return data.get("tool", {}).get("tinyc", {}), parent

  return {}, None
