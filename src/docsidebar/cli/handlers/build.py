"""
Build Command Handler.

Inspects a package's public surface and emits its ``sidebar-items.js``.
"""

from pathlib import Path
from typing import Optional

from docsidebar.core.codec import dump, dumps
from docsidebar.discovery.inspector import SurfaceInspector
from docsidebar.utils.console import log_error, log_info, log_success, log_warning


def handle_build(package: str, out: Optional[Path], include_private: bool = False) -> int:
  """
  Handles 'build' command.

  Args:
      package (str): Importable package to index.
      out (Optional[Path]): Destination file. If None, the payload is printed to stdout.
      include_private (bool): Index underscore-prefixed members too.

  Returns:
      int: Exit code (0 on success, 1 if nothing could be indexed or written).
  """
  log_info(f"Inspecting [code]{package}[/code]...")
  index = SurfaceInspector(include_private=include_private).inspect(package)

  if len(index) == 0:
    log_warning(f"No public items found in '{package}'.")
    return 1

  if out is None:
    print(dumps(index))
    return 0

  try:
    written = dump(index, out)
  except OSError as e:
    log_error(f"Failed to write {out}: {e}")
    return 1

  log_success(f"Indexed {len(index)} items into [path]{written}[/path]")
  return 0
