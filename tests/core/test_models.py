"""
Tests for SidebarEntry / SidebarIndex.

Verifies:
1. Entry identifier validation.
2. Uniqueness within (but not across) categories.
3. Order preservation and the generator sort order.
4. Immutability.
"""

import pytest
from pydantic import ValidationError

from docsidebar.core.models import SidebarEntry, SidebarIndex
from docsidebar.enums import ItemCategory
from docsidebar.errors import SidebarValidationError


def test_entry_accepts_identifiers_and_empty_summary():
  entry = SidebarEntry(name="HyphenSplitter")
  assert entry.summary == ""
  assert entry.as_pair() == ["HyphenSplitter", ""]


@pytest.mark.parametrize("name", ["", "1wrap", "word-splitter", "fill()", "a b", "wrap\n"])
def test_entry_rejects_bad_names(name):
  with pytest.raises(ValidationError):
    SidebarEntry(name=name, summary="x")


def test_entry_is_frozen():
  entry = SidebarEntry(name="wrap", summary="x")
  with pytest.raises(ValidationError):
    entry.name = "fill"


def test_duplicate_names_in_category_rejected():
  with pytest.raises(SidebarValidationError, match="Duplicate name 'wrap'"):
    SidebarIndex.from_entries({"fn": [("wrap", "a"), ("wrap", "b")]})


def test_same_name_allowed_in_different_categories():
  index = SidebarIndex.from_entries({"fn": [("Wrapper", "")], "struct": [("Wrapper", "")]})
  assert len(index) == 2


def test_unknown_category_rejected():
  with pytest.raises(SidebarValidationError, match="Unknown item category"):
    SidebarIndex.from_entries({"macro": [("wrap", "")]})


def test_payload_order_preserved():
  payload = {"trait": [["WordSplitter", "b"]], "fn": [["wrap", "a"], ["dedent", "c"]]}
  index = SidebarIndex.from_payload(payload)

  assert index.categories() == (ItemCategory.TRAIT, ItemCategory.FN)
  assert index.names(ItemCategory.FN) == ["wrap", "dedent"]
  assert list(index.to_payload().items()) == list(payload.items())


def test_sorted_uses_canonical_category_and_codepoint_order():
  index = SidebarIndex.from_entries(
    {
      "trait": [("WordSplitter", "")],
      "struct": [("Wrapper", ""), ("NoHyphenation", ""), ("HyphenSplitter", "")],
      "fn": [("wrap", ""), ("Zeta", ""), ("dedent", "")],
    }
  )
  result = index.sorted()

  assert result.categories() == (ItemCategory.FN, ItemCategory.STRUCT, ItemCategory.TRAIT)
  assert result.names("fn") == ["Zeta", "dedent", "wrap"]
  assert result.names("struct") == ["HyphenSplitter", "NoHyphenation", "Wrapper"]
  # original untouched
  assert index.names("fn") == ["wrap", "Zeta", "dedent"]


def test_queries_on_missing_category():
  index = SidebarIndex.from_entries({"fn": [("wrap", "")]})

  assert index.entries("trait") == ()
  assert index.find("struct", "Wrapper") is None
  assert ("struct", "Wrapper") not in index
  assert ("bogus", "wrap") not in index
  assert "wrap" not in index


def test_locate_finds_category(textwrap_sidebar_text):
  from docsidebar.core.codec import loads

  index = loads(textwrap_sidebar_text)
  category, entry = index.locate("NoHyphenation")

  assert category is ItemCategory.STRUCT
  assert entry.summary.startswith("Use this as a [`Wrapper.splitter`]")
  assert index.locate("missing") is None
