"""
Process-wide Sidebar Registry.

Mirrors the browser-side ``initSidebarItems`` call: each documented module
registers its index exactly once, and the table stays immutable for the rest of
the session. Re-registering identical content is tolerated (pages commonly load
the same script more than once); conflicting content is an error.
"""

from typing import Any, Dict, List, Optional, Union

from docsidebar.core.models import SidebarIndex
from docsidebar.errors import RegistrationError

_SIDEBAR_REGISTRY: Dict[str, SidebarIndex] = {}


def init_sidebar_items(payload: Union[SidebarIndex, Dict[str, Any]], module: str = "") -> SidebarIndex:
  """
  Registers the sidebar for a documented module.

  Args:
      payload: A validated index or a raw ``{"fn": [[name, summary]], ...}`` dict.
      module (str): Dotted/pathed module the sidebar belongs to ("" for the crate root).

  Returns:
      SidebarIndex: The registered (possibly pre-existing) index.

  Raises:
      SidebarValidationError: If a raw payload is malformed.
      RegistrationError: If the module already holds a different index.
  """
  index = payload if isinstance(payload, SidebarIndex) else SidebarIndex.from_payload(payload)

  existing = _SIDEBAR_REGISTRY.get(module)
  if existing is not None:
    if existing.ordered_items() != index.ordered_items():
      raise RegistrationError(f"Sidebar for module '{module or '<root>'}' is already registered with different items")
    return existing

  _SIDEBAR_REGISTRY[module] = index
  return index


def get_sidebar(module: str = "") -> Optional[SidebarIndex]:
  return _SIDEBAR_REGISTRY.get(module)


def registered_modules() -> List[str]:
  """
  Lists modules with a registered sidebar.

  Returns:
      List[str]: Module keys in registration order.
  """
  return list(_SIDEBAR_REGISTRY.keys())


def clear_registry() -> None:
  """Drops every registration. Intended for test isolation."""
  _SIDEBAR_REGISTRY.clear()
