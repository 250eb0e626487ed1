"""
Check Command Handler.

Compares a shipped ``sidebar-items.js`` against the package it documents and
reports items that are missing, stale, recategorized, or re-summarized.
"""

import json
from pathlib import Path

from rich.table import Table

from docsidebar.core.codec import load
from docsidebar.core.staleness import diff_surface
from docsidebar.discovery.inspector import SurfaceInspector
from docsidebar.errors import SidebarFormatError, SidebarValidationError
from docsidebar.utils.console import console, log_error, log_info, log_success


def handle_check(path: Path, package: str, json_mode: bool = False, include_private: bool = False) -> int:
  """
  Handles 'check' command.

  Args:
      path (Path): Documented payload file.
      package (str): Package whose surface the file should describe.
      json_mode (bool): If True, print the diff as JSON to stdout and suppress logs.
      include_private (bool): Index underscore-prefixed members too.

  Returns:
      int: 0 if the index is up to date, 1 if it drifted or could not be loaded.
  """
  try:
    documented = load(path)
  except OSError as e:
    log_error(f"Could not read {path}: {e}")
    return 1
  except (SidebarFormatError, SidebarValidationError) as e:
    log_error(f"{path}: {e}")
    return 1

  if not json_mode:
    log_info(f"Comparing [path]{path}[/path] against [code]{package}[/code]...")

  actual = SurfaceInspector(include_private=include_private).inspect(package)
  diff = diff_surface(documented, actual)

  if json_mode:
    print(json.dumps(diff.to_dict(), indent=2))
    return 0 if diff.is_clean else 1

  if diff.is_clean:
    log_success("Sidebar index is up to date.")
    return 0

  table = Table(title="Sidebar drift")
  table.add_column("Status", style="bold")
  table.add_column("Category")
  table.add_column("Name")
  table.add_column("Detail")

  for cat, name in diff.missing:
    table.add_row("[yellow]missing[/yellow]", cat, name, "not listed in the index")
  for cat, name in diff.stale:
    table.add_row("[red]stale[/red]", cat, name, "no longer exported")
  for move in diff.moved:
    table.add_row("[magenta]moved[/magenta]", move.actual, move.name, f"listed as '{move.documented}'")
  for change in diff.changed_summaries:
    table.add_row("[cyan]summary[/cyan]", change.category, change.name, change.actual)

  console.print(table)
  log_error(f"Sidebar index is out of date with '{package}'. Re-run 'docsidebar build'.")
  return 1
