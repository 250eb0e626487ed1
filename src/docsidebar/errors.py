"""
Domain exceptions.

All errors derive from `ValueError` so callers that only care about "bad input"
can catch the builtin type.
"""

from typing import List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
  from docsidebar.core.validation import ValidationIssue


class SidebarFormatError(ValueError):
  """Raised when a payload is not a parsable ``initSidebarItems`` call."""


class SidebarValidationError(ValueError):
  """
  Raised when a decoded payload violates the index structure.

  Attributes:
      issues (List[ValidationIssue]): Every problem found, in document order.
  """

  def __init__(self, message: str, issues: Sequence["ValidationIssue"] = ()):
    super().__init__(message)
    self.issues: List["ValidationIssue"] = list(issues)


class RegistrationError(ValueError):
  """Raised when a module's sidebar is registered twice with different content."""
