"""
Staleness Detection.

A sidebar index is generated data; the only defect it can have at runtime is
drifting out of sync with the library it documents. This module compares a
documented index against a freshly inspected one and reports the drift.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple

from docsidebar.core.models import SidebarIndex
from docsidebar.enums import ItemCategory

#: (category tag, name)
ItemKey = Tuple[str, str]


@dataclass
class SummaryChange:
  category: str
  name: str
  documented: str
  actual: str


@dataclass
class CategoryMove:
  name: str
  documented: str
  actual: str


@dataclass
class SurfaceDiff:
  """
  Differences between a documented index and the actual library surface.

  Attributes:
      missing (List[ItemKey]): Present in the library, absent from the index.
      stale (List[ItemKey]): Listed in the index, gone from the library.
      moved (List[CategoryMove]): Same name, different category.
      changed_summaries (List[SummaryChange]): Same item, different summary.
  """

  missing: List[ItemKey] = field(default_factory=list)
  stale: List[ItemKey] = field(default_factory=list)
  moved: List[CategoryMove] = field(default_factory=list)
  changed_summaries: List[SummaryChange] = field(default_factory=list)

  @property
  def is_clean(self) -> bool:
    return not (self.missing or self.stale or self.moved or self.changed_summaries)

  def to_dict(self) -> Dict[str, Any]:
    """
    JSON-friendly representation.

    Returns:
        Dict[str, Any]: Lists of plain dicts, plus an ``is_clean`` flag.
    """
    return {
      "is_clean": self.is_clean,
      "missing": [{"category": c, "name": n} for c, n in self.missing],
      "stale": [{"category": c, "name": n} for c, n in self.stale],
      "moved": [vars(m) for m in self.moved],
      "changed_summaries": [vars(s) for s in self.changed_summaries],
    }


def _flatten(index: SidebarIndex) -> Dict[ItemKey, str]:
  flat: Dict[ItemKey, str] = {}
  for category in index.categories():
    for entry in index.entries(category):
      flat[(category.value, entry.name)] = entry.summary
  return flat


def diff_surface(documented: SidebarIndex, actual: SidebarIndex) -> SurfaceDiff:
  """
  Compares two indexes item by item.

  An item whose name appears in both indexes under different categories is
  reported once, as a move, rather than as a missing/stale pair.

  Args:
      documented (SidebarIndex): The index shipped with the docs.
      actual (SidebarIndex): The index inspected from the library.

  Returns:
      SurfaceDiff: The detected drift; `is_clean` when none.
  """
  doc_items = _flatten(documented)
  act_items = _flatten(actual)
  diff = SurfaceDiff()

  only_doc = [k for k in doc_items if k not in act_items]
  only_act = [k for k in act_items if k not in doc_items]

  act_by_name: Dict[str, List[str]] = {}
  for cat, name in only_act:
    act_by_name.setdefault(name, []).append(cat)

  paired: Set[ItemKey] = set()
  for cat, name in only_doc:
    candidates = act_by_name.get(name)
    if candidates:
      target = candidates.pop(0)
      diff.moved.append(CategoryMove(name=name, documented=cat, actual=target))
      paired.add((target, name))
    else:
      diff.stale.append((cat, name))

  diff.missing = [k for k in only_act if k not in paired]

  for key, summary in doc_items.items():
    if key in act_items and act_items[key] != summary:
      diff.changed_summaries.append(
        SummaryChange(category=key[0], name=key[1], documented=summary, actual=act_items[key])
      )

  order = {c.value: i for i, c in enumerate(ItemCategory)}
  diff.missing.sort(key=lambda k: (order[k[0]], k[1]))
  diff.stale.sort(key=lambda k: (order[k[0]], k[1]))
  return diff
