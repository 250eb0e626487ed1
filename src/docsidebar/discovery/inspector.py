"""
Public Surface Inspector.

Builds a :class:`SidebarIndex` from an installed (or importable) Python package.

It employs a two-stage strategy:

1.  **Static Analysis (Griffe)**: Parses the package source without importing it.
    Preferred, since it sees ``__all__`` and docstrings without side effects.
2.  **Runtime Introspection (Inspect)**: Falls back to importing the module when
    static loading fails or yields nothing (compiled extensions, dynamic modules).

Mapping rules:

*   public functions -> ``fn``
*   public classes -> ``struct``
*   abstract interfaces (``abc.ABC`` / ``typing.Protocol`` subclasses, or classes
    declaring abstract methods) -> ``trait``

Only top-level members of the package module are indexed. Re-exports from the
package's own submodules are followed; names imported from other distributions
are skipped.
"""

import importlib
import inspect
import logging
from typing import Any, Dict, Iterable, List, Optional, Set

import griffe

from docsidebar.core.models import SidebarEntry, SidebarIndex
from docsidebar.core.validation import is_identifier
from docsidebar.enums import ItemCategory
from docsidebar.utils.console import log_warning

# Static analysis failures are expected (dynamic packages) and handled by the fallback
logging.getLogger("griffe").setLevel(logging.CRITICAL)

_INTERFACE_BASES = {"ABC", "abc.ABC", "Protocol", "typing.Protocol", "typing_extensions.Protocol"}
_ABSTRACT_DECORATORS = {"abstractmethod", "abc.abstractmethod"}


class SurfaceInspector:
  """
  Discovers the documented surface of a package.

  Attributes:
      include_private (bool): If True, underscore-prefixed names are indexed too.
      _package_cache (Dict[str, Any]): Cache of statically parsed Griffe trees.
  """

  def __init__(self, include_private: bool = False):
    self.include_private = include_private
    self._package_cache: Dict[str, Any] = {}

  def inspect(self, package_name: str) -> SidebarIndex:
    """
    Scans a package and returns its sidebar index.

    Args:
        package_name (str): Importable name, e.g. "textwrap".

    Returns:
        SidebarIndex: Sorted index; empty if the package cannot be loaded.
    """
    buckets: Dict[ItemCategory, Dict[str, str]] = {c: {} for c in ItemCategory}

    try:
      if package_name in self._package_cache:
        root = self._package_cache[package_name]
      else:
        root = griffe.load(package_name)
        self._package_cache[package_name] = root

      self._collect_griffe(root, package_name, buckets)
    except Exception:
      # Griffe could not parse the package; fall back to importing it
      pass

    if not any(buckets.values()):
      try:
        module = importlib.import_module(package_name)
        self._collect_runtime(module, package_name, buckets)
      except ImportError:
        log_warning(f"Could not load package '{package_name}'. Is it installed?")
      except Exception as e:
        log_warning(f"Error analyzing '{package_name}': {e}")

    return _build_index(buckets)

  # --- Static (Griffe) ---

  def _collect_griffe(self, root: Any, package_name: str, buckets: Dict[ItemCategory, Dict[str, str]]) -> None:
    exports = _griffe_exports(root)

    for member_name, member in root.members.items():
      if not self._is_public(member_name, exports):
        continue

      try:
        if member.is_alias:
          target_path = str(getattr(member, "target_path", "") or "")
          if not _belongs_to(target_path, package_name):
            continue
          member = member.final_target

        if member.is_function:
          buckets[ItemCategory.FN][member_name] = _griffe_summary(member)
        elif member.is_class:
          category = ItemCategory.TRAIT if _griffe_is_interface(member) else ItemCategory.STRUCT
          buckets[category][member_name] = _griffe_summary(member)
      except Exception:
        continue

  # --- Runtime (inspect) ---

  def _collect_runtime(self, module: Any, package_name: str, buckets: Dict[ItemCategory, Dict[str, str]]) -> None:
    exports = getattr(module, "__all__", None)
    export_set: Optional[Set[str]] = set(exports) if exports is not None else None

    for name, member in inspect.getmembers(module):
      if not self._is_public(name, export_set):
        continue

      owner = getattr(member, "__module__", None) or ""
      if not _belongs_to(owner, package_name):
        continue

      if inspect.isclass(member):
        category = ItemCategory.TRAIT if _runtime_is_interface(member) else ItemCategory.STRUCT
        buckets[category][name] = _runtime_summary(member)
      elif inspect.isfunction(member) or inspect.isbuiltin(member):
        buckets[ItemCategory.FN][name] = _runtime_summary(member)

  def _is_public(self, name: str, exports: Optional[Iterable[str]]) -> bool:
    if exports is not None:
      public = name in exports
    else:
      public = self.include_private or not name.startswith("_")
    if public and not is_identifier(name):
      log_warning(f"Skipping [code]{name!r}[/code]: not a valid item name.")
      return False
    return public


def _belongs_to(path: str, package_name: str) -> bool:
  return path == package_name or path.startswith(package_name + ".")


def _griffe_exports(root: Any) -> Optional[Set[str]]:
  exports = getattr(root, "exports", None)
  if not exports:
    return None
  return {str(e).strip("'\"") for e in exports}


def _griffe_summary(obj: Any) -> str:
  docstring = getattr(obj, "docstring", None)
  if docstring is None or not docstring.value:
    return ""
  return _first_line(docstring.value)


def _griffe_is_interface(cls: Any) -> bool:
  for base in getattr(cls, "bases", []) or []:
    base_name = str(base)
    if base_name in _INTERFACE_BASES or base_name.startswith(("Protocol[", "typing.Protocol[")):
      return True

  for method in cls.members.values():
    try:
      if method.is_alias or not method.is_function:
        continue
      if any(str(d.value) in _ABSTRACT_DECORATORS for d in method.decorators):
        return True
    except Exception:
      continue
  return False


def _runtime_is_interface(cls: type) -> bool:
  if inspect.isabstract(cls):
    return True
  if getattr(cls, "_is_protocol", False):
    return True
  return any(base.__module__ == "abc" and base.__name__ == "ABC" for base in cls.__bases__)


def _runtime_summary(obj: Any) -> str:
  # __doc__ directly: inspect.getdoc() would inherit a base class docstring
  raw = getattr(obj, "__doc__", None)
  if not isinstance(raw, str) or not raw.strip():
    return ""
  return _first_line(inspect.cleandoc(raw))


def _first_line(doc: str) -> str:
  return doc.strip().split("\n")[0].strip()


def _build_index(buckets: Dict[ItemCategory, Dict[str, str]]) -> SidebarIndex:
  sections: Dict[ItemCategory, List[SidebarEntry]] = {}
  for category in ItemCategory:
    items = buckets.get(category) or {}
    if items:
      sections[category] = [SidebarEntry(name=n, summary=s) for n, s in items.items()]
  return SidebarIndex.from_entries(sections).sorted()
