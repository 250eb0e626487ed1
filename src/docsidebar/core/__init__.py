"""Core data model, codec, validation and registry for sidebar indexes."""

from docsidebar.core.models import SidebarEntry, SidebarIndex
from docsidebar.core.codec import dump, dumps, load, loads
from docsidebar.core.registry import init_sidebar_items, get_sidebar
from docsidebar.core.staleness import SurfaceDiff, diff_surface
from docsidebar.core.validation import ValidationIssue, collect_issues

__all__ = [
  "SidebarEntry",
  "SidebarIndex",
  "SurfaceDiff",
  "ValidationIssue",
  "collect_issues",
  "diff_surface",
  "dump",
  "dumps",
  "get_sidebar",
  "init_sidebar_items",
  "load",
  "loads",
]
