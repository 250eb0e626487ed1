"""
Validate & Show Command Handlers.

``validate`` reports every structural issue in a payload file (optionally as
JSON). ``show`` pretty-prints a valid index as a Rich table.
"""

import json
from pathlib import Path

from rich.table import Table
from rich.text import Text

from docsidebar.core.codec import decode, load, read_text
from docsidebar.core.validation import collect_issues
from docsidebar.errors import SidebarFormatError, SidebarValidationError
from docsidebar.utils.console import console, log_error, log_success


def handle_validate(path: Path, json_mode: bool = False) -> int:
  """
  Handles 'validate' command.

  Args:
      path (Path): Payload file to check.
      json_mode (bool): If True, print a JSON list of issues to stdout instead of logs.

  Returns:
      int: 0 if the payload is valid, 1 otherwise.
  """
  try:
    raw = decode(read_text(path))
  except OSError as e:
    log_error(f"Could not read {path}: {e}")
    return 1
  except SidebarFormatError as e:
    if json_mode:
      print(json.dumps([{"code": "bad_format", "message": str(e), "category": None, "index": None}], indent=2))
    else:
      log_error(f"{path}: {e}")
    return 1

  issues = collect_issues(raw)

  if json_mode:
    print(json.dumps([i.to_dict() for i in issues], indent=2))
    return 1 if issues else 0

  if not issues:
    log_success(f"[path]{path}[/path] is a valid sidebar index.")
    return 0

  for issue in issues:
    log_error(f"{issue.location()}: {issue.message} [dim]({issue.code})[/dim]")
  log_error(f"{len(issues)} issue(s) found in {path}")
  return 1


def handle_show(path: Path) -> int:
  """
  Handles 'show' command.

  Args:
      path (Path): Payload file to display.

  Returns:
      int: 0 on success, 1 if the file cannot be loaded.
  """
  try:
    index = load(path)
  except OSError as e:
    log_error(f"Could not read {path}: {e}")
    return 1
  except (SidebarFormatError, SidebarValidationError) as e:
    log_error(f"{path}: {e}")
    return 1

  table = Table(title=str(path))
  table.add_column("Category", style="cyan", no_wrap=True)
  table.add_column("Name", style="bold")
  table.add_column("Summary")

  for category in index.categories():
    for entry in index.entries(category):
      table.add_row(category.value, entry.name, Text(entry.summary))
    table.add_section()

  console.print(table)
  return 0
