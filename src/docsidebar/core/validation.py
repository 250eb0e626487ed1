"""
Structural Validation for Sidebar Payloads.

Checks an untrusted, already JSON-decoded payload against the shape the
documentation browser expects::

    {"fn": [[name, summary], ...], "struct": [...], "trait": [...]}

Unlike model construction (which stops at the first violation), this module
reports every issue so the ``validate`` command can show a complete report.
"""

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Set

from docsidebar.enums import ItemCategory
from docsidebar.errors import SidebarValidationError

IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True)
class ValidationIssue:
  """
  A single structural problem.

  Attributes:
      code (str): Stable machine-readable identifier (e.g. "duplicate_name").
      message (str): Human readable description.
      category (Optional[str]): Payload key the issue belongs to, if any.
      index (Optional[int]): Position of the offending entry, if any.
  """

  code: str
  message: str
  category: Optional[str] = None
  index: Optional[int] = None

  def location(self) -> str:
    """
    Formats the issue position, e.g. ``fn[2]``.

    Returns:
        str: Location string, or "<root>" for payload-level issues.
    """
    if self.category is None:
      return "<root>"
    if self.index is None:
      return self.category
    return f"{self.category}[{self.index}]"

  def to_dict(self) -> Dict[str, Any]:
    return asdict(self)


def is_identifier(name: str) -> bool:
  """
  Checks the exported identifier syntax of the documented library.

  Args:
      name (str): Candidate item name.

  Returns:
      bool: True if the name is a non-empty ASCII identifier.
  """
  return bool(IDENTIFIER_RE.fullmatch(name))


def collect_issues(raw: Any) -> List[ValidationIssue]:
  """
  Inspects a decoded payload and returns every structural issue found.

  Args:
      raw (Any): Result of decoding the JSON object inside ``initSidebarItems``.

  Returns:
      List[ValidationIssue]: Issues in document order (empty when valid).
  """
  if not isinstance(raw, dict):
    return [ValidationIssue("not_object", f"Payload must be an object, got {type(raw).__name__}")]

  known = {c.value for c in ItemCategory}
  issues: List[ValidationIssue] = []

  for key, value in raw.items():
    if key not in known:
      issues.append(ValidationIssue("unknown_category", f"Unknown category '{key}'", category=str(key)))
      continue

    if not isinstance(value, list):
      issues.append(
        ValidationIssue("not_list", f"Category '{key}' must map to a list, got {type(value).__name__}", category=key)
      )
      continue

    issues.extend(_check_entries(key, value))

  return issues


def _check_entries(category: str, entries: List[Any]) -> List[ValidationIssue]:
  issues: List[ValidationIssue] = []
  seen: Set[str] = set()

  for idx, entry in enumerate(entries):
    if not isinstance(entry, (list, tuple)) or len(entry) != 2:
      issues.append(
        ValidationIssue("bad_entry", "Entry must be a [name, summary] pair", category=category, index=idx)
      )
      continue

    name, summary = entry

    if not isinstance(summary, str):
      issues.append(
        ValidationIssue("bad_summary", "Summary must be a string (null is not allowed)", category=category, index=idx)
      )

    if not isinstance(name, str):
      issues.append(
        ValidationIssue("bad_name", "Name must be a string (null is not allowed)", category=category, index=idx)
      )
      continue

    if not name:
      issues.append(ValidationIssue("empty_name", "Name must not be empty", category=category, index=idx))
      continue

    if not is_identifier(name):
      issues.append(
        ValidationIssue("bad_identifier", f"'{name}' is not a valid identifier", category=category, index=idx)
      )

    if name in seen:
      issues.append(
        ValidationIssue("duplicate_name", f"Duplicate name '{name}' in '{category}'", category=category, index=idx)
      )
    seen.add(name)

  return issues


def check_payload(raw: Any) -> None:
  """
  Raises if the payload has any structural issue.

  Args:
      raw (Any): Decoded payload.

  Raises:
      SidebarValidationError: Carrying all issues found.
  """
  issues = collect_issues(raw)
  if issues:
    first = issues[0]
    suffix = f" (+{len(issues) - 1} more)" if len(issues) > 1 else ""
    raise SidebarValidationError(f"{first.location()}: {first.message}{suffix}", issues)
