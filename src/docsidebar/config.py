"""
Runtime Configuration Store.

Settings are read from the nearest ``pyproject.toml`` (``[tool.docsidebar]``)
and overridden by CLI arguments.

Example::

    [tool.docsidebar]
    package = "textwrap"
    output = "docs/_static/textwrap/sidebar-items.js"
    base_url = "/textwrap/"
    curly_quotes = true
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

CONFIG_SECTION = "docsidebar"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for building and rendering sidebars.
  """

  package: Optional[str] = Field(None, description="Importable package to index (e.g. 'textwrap').")
  output: Optional[Path] = Field(None, description="Where 'build' writes sidebar-items.js.")
  module_name: str = Field("", description="Heading rendered above the sidebar sections.")
  base_url: str = Field("", description="Prefix for item page links in rendered HTML.")
  curly_quotes: bool = Field(False, description="Convert straight quotes when rendering markdown.")
  include_private: bool = Field(False, description="Index underscore-prefixed members too.")

  @field_validator("package")
  @classmethod
  def validate_package(cls, v: Optional[str]) -> Optional[str]:
    """
    Normalizes the package name.

    Raises:
        ValueError: If the name is blank after stripping.
    """
    if v is None:
      return None
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("Package name must not be empty")
    return v_clean

  @classmethod
  def load(
    cls,
    package: Optional[str] = None,
    output: Optional[Path] = None,
    module_name: Optional[str] = None,
    base_url: Optional[str] = None,
    curly_quotes: Optional[bool] = None,
    include_private: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        package (Optional[str]): Override for the package to index.
        output (Optional[Path]): Override for the payload destination.
        module_name (Optional[str]): Override for the sidebar heading.
        base_url (Optional[str]): Override for the link prefix.
        curly_quotes (Optional[bool]): Override for quote conversion.
        include_private (Optional[bool]): Override for private member indexing.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, toml_dir = _load_toml_settings(search_path or Path.cwd())

    final_package = package or toml_config.get("package")

    final_output = output
    if final_output is None and "output" in toml_config:
      final_output = Path(toml_config["output"])
      if toml_dir and not final_output.is_absolute():
        final_output = (toml_dir / final_output).resolve()

    final_module = module_name if module_name is not None else toml_config.get("module_name", final_package or "")

    return cls(
      package=final_package,
      output=final_output,
      module_name=final_module,
      base_url=base_url if base_url is not None else toml_config.get("base_url", ""),
      curly_quotes=curly_quotes if curly_quotes is not None else toml_config.get("curly_quotes", False),
      include_private=include_private if include_private is not None else toml_config.get("include_private", False),
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches parents for 'pyproject.toml' and extracts the tool section.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      return data.get("tool", {}).get(CONFIG_SECTION, {}), parent

  return {}, None
