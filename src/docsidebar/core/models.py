"""
Pydantic Models for the Sidebar Index.

A sidebar index is an ordered mapping from item category (`fn`, `struct`,
`trait`) to an ordered sequence of ``(name, summary)`` entries. Order is display
order and is preserved exactly. Both models are frozen: an index is built once
(at documentation build time) and never mutated afterwards.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from docsidebar.core.validation import check_payload, is_identifier
from docsidebar.enums import ItemCategory
from docsidebar.errors import SidebarValidationError

#: Wire shape of a payload: category tag -> list of [name, summary] pairs.
Payload = Dict[str, List[List[str]]]

EntryLike = Union["SidebarEntry", Sequence[str]]


class SidebarEntry(BaseModel):
  """
  One navigable item.

  Attributes:
      name (str): Identifier of the item in the documented namespace.
      summary (str): One-line description (may contain inline markdown).
  """

  model_config = ConfigDict(frozen=True)

  name: str = Field(..., description="Exported identifier, e.g. 'wrap'.")
  summary: str = Field("", description="One-line description shown as a tooltip.")

  @field_validator("name")
  @classmethod
  def validate_name(cls, v: str) -> str:
    """
    Ensures the name is a non-empty identifier.

    Raises:
        ValueError: If the name is empty or not an identifier.
    """
    if not v:
      raise ValueError("Entry name must not be empty")
    if not is_identifier(v):
      raise ValueError(f"'{v}' is not a valid identifier")
    return v

  def as_pair(self) -> List[str]:
    return [self.name, self.summary]


class SidebarIndex(BaseModel):
  """
  Immutable, ordered category -> entries table.

  Attributes:
      sections (Dict[ItemCategory, Tuple[SidebarEntry, ...]]): Sections in display order.
  """

  model_config = ConfigDict(frozen=True)

  sections: Dict[ItemCategory, Tuple[SidebarEntry, ...]] = Field(default_factory=dict)

  @model_validator(mode="after")
  def _check_unique_names(self) -> "SidebarIndex":
    for category, entries in self.sections.items():
      seen = set()
      for entry in entries:
        if entry.name in seen:
          raise ValueError(f"Duplicate name '{entry.name}' in '{category.value}'")
        seen.add(entry.name)
    return self

  # --- Construction ---

  @classmethod
  def from_payload(cls, raw: Any) -> "SidebarIndex":
    """
    Builds an index from a decoded wire payload.

    Args:
        raw (Any): ``{"fn": [["wrap", "..."]], ...}``.

    Returns:
        SidebarIndex: The validated index, preserving order.

    Raises:
        SidebarValidationError: If the payload is malformed.
    """
    check_payload(raw)
    return cls.from_entries(raw)

  @classmethod
  def from_entries(cls, mapping: Mapping[Union[ItemCategory, str], Iterable[EntryLike]]) -> "SidebarIndex":
    """
    Builds an index from entries or ``(name, summary)`` pairs.

    Args:
        mapping: Category (enum or tag) -> iterable of entries.

    Returns:
        SidebarIndex: The validated index.

    Raises:
        SidebarValidationError: If any category, name, or uniqueness rule fails.
    """
    sections: Dict[ItemCategory, Tuple[SidebarEntry, ...]] = {}
    try:
      for key, items in mapping.items():
        category = key if isinstance(key, ItemCategory) else ItemCategory.parse(key)
        sections[category] = tuple(_coerce_entry(item) for item in items)
      return cls(sections=sections)
    except ValidationError as e:
      raise SidebarValidationError(_first_error(e)) from e
    except ValueError as e:
      raise SidebarValidationError(str(e)) from e

  # --- Queries ---

  def categories(self) -> Tuple[ItemCategory, ...]:
    return tuple(self.sections.keys())

  def entries(self, category: Union[ItemCategory, str]) -> Tuple[SidebarEntry, ...]:
    """
    Returns the entries of a category, in display order.

    Args:
        category: Enum member or raw tag.

    Returns:
        Tuple[SidebarEntry, ...]: Empty if the category is absent.
    """
    return self.sections.get(ItemCategory(category), ())

  def names(self, category: Union[ItemCategory, str]) -> List[str]:
    return [e.name for e in self.entries(category)]

  def find(self, category: Union[ItemCategory, str], name: str) -> Optional[SidebarEntry]:
    for entry in self.entries(category):
      if entry.name == name:
        return entry
    return None

  def locate(self, name: str) -> Optional[Tuple[ItemCategory, SidebarEntry]]:
    """
    Finds an item by name across all categories.

    Args:
        name (str): Item identifier.

    Returns:
        Optional[Tuple[ItemCategory, SidebarEntry]]: First match in display order.
    """
    for category, entries in self.sections.items():
      for entry in entries:
        if entry.name == name:
          return category, entry
    return None

  def ordered_items(self) -> Tuple[Tuple[ItemCategory, Tuple[SidebarEntry, ...]], ...]:
    """Order-sensitive view used for identity comparisons."""
    return tuple(self.sections.items())

  def __contains__(self, item: object) -> bool:
    if not isinstance(item, tuple) or len(item) != 2:
      return False
    category, name = item
    try:
      return self.find(category, name) is not None
    except ValueError:
      return False

  def __len__(self) -> int:
    return sum(len(entries) for entries in self.sections.values())

  # --- Conversion ---

  def to_payload(self) -> Payload:
    """
    Converts back to the wire shape.

    Returns:
        Payload: Plain dict/list structure, order preserved.
    """
    return {category.value: [e.as_pair() for e in entries] for category, entries in self.sections.items()}

  def sorted(self) -> "SidebarIndex":
    """
    Returns a copy in generator order.

    Categories follow `ItemCategory` declaration order; entries are sorted by
    name using plain code-point order (uppercase before lowercase).

    Returns:
        SidebarIndex: A new, sorted index.
    """
    order = list(ItemCategory)
    sections = {
      category: tuple(sorted(self.sections[category], key=lambda e: e.name))
      for category in sorted(self.sections, key=order.index)
    }
    return SidebarIndex(sections=sections)


def _coerce_entry(item: EntryLike) -> SidebarEntry:
  if isinstance(item, SidebarEntry):
    return item
  if isinstance(item, (list, tuple)) and len(item) == 2:
    return SidebarEntry(name=item[0], summary=item[1])
  raise ValueError(f"Entry must be a [name, summary] pair, got {item!r}")


def _first_error(e: ValidationError) -> str:
  errors = e.errors()
  if not errors:
    return str(e)
  msg = errors[0].get("msg", str(e))
  return msg.removeprefix("Value error, ")
