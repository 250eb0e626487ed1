"""
Enumerations for docsidebar.

Defines the fixed set of item categories a sidebar index may contain.
"""

from enum import Enum


class ItemCategory(str, Enum):
  """
  Kind of documented item listed in the sidebar.

  Declaration order is the canonical display order used when an index
  is generated or sorted.
  """

  FN = "fn"
  STRUCT = "struct"
  TRAIT = "trait"

  @property
  def label(self) -> str:
    """
    Human readable heading for the sidebar section.

    Returns:
        str: e.g. "Functions".
    """
    return _LABELS[self]

  @property
  def page_prefix(self) -> str:
    """
    Prefix of the generated item page (``fn.wrap.html``).

    Returns:
        str: The category tag itself.
    """
    return self.value

  def page_name(self, name: str) -> str:
    """
    Builds the relative page filename for an item of this category.

    Args:
        name (str): Item identifier.

    Returns:
        str: Page filename, e.g. ``struct.Wrapper.html``.
    """
    return f"{self.page_prefix}.{name}.html"

  @classmethod
  def parse(cls, tag: str) -> "ItemCategory":
    """
    Resolves a raw payload key to a category.

    Args:
        tag (str): Payload key such as "fn".

    Returns:
        ItemCategory: The matching category.

    Raises:
        ValueError: If the tag is not a known category.
    """
    try:
      return cls(tag)
    except ValueError:
      known = ", ".join(c.value for c in cls)
      raise ValueError(f"Unknown item category: '{tag}'. Expected one of: {known}") from None


_LABELS = {
  ItemCategory.FN: "Functions",
  ItemCategory.STRUCT: "Structs",
  ItemCategory.TRAIT: "Traits",
}
