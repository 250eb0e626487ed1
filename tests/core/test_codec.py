"""
Tests for the sidebar-items.js codec.

Verifies:
1. The generated textwrap payload parses with order preserved.
2. Canonical payloads round-trip byte-for-byte.
3. Wrapper tolerance (whitespace, missing semicolon, bare JSON).
4. Malformed input raises SidebarFormatError / SidebarValidationError.
"""

import json

import pytest
from hypothesis import given, strategies as st

from docsidebar.core.codec import decode, dump, dumps, load, loads
from docsidebar.core.models import SidebarIndex
from docsidebar.enums import ItemCategory
from docsidebar.errors import SidebarFormatError, SidebarValidationError


def test_textwrap_payload_contents(textwrap_sidebar_text):
  """Example end-to-end check on the real generated payload."""
  index = loads(textwrap_sidebar_text)

  assert index.categories() == (ItemCategory.FN, ItemCategory.STRUCT, ItemCategory.TRAIT)
  assert index.names("fn") == ["dedent", "fill", "indent", "wrap"]
  assert index.names("struct") == ["HyphenSplitter", "NoHyphenation", "Wrapper"]
  assert index.names("trait") == ["WordSplitter"]

  assert ("fn", "wrap") in index
  assert ("struct", "Wrapper") in index
  assert ("trait", "WordSplitter") in index
  assert index.find("trait", "WordSplitter").summary == "An interface for splitting words."


def test_textwrap_payload_round_trips_byte_identical(textwrap_sidebar_text):
  assert dumps(loads(textwrap_sidebar_text)) == textwrap_sidebar_text


def test_dump_and_load_file(tmp_path, textwrap_sidebar_path):
  index = load(textwrap_sidebar_path)
  out = dump(index, tmp_path / "nested" / "sidebar-items.js")

  assert out.read_bytes() == textwrap_sidebar_path.read_bytes()
  assert load(out).ordered_items() == index.ordered_items()


def test_dumps_is_compact_and_has_no_trailing_newline():
  index = SidebarIndex.from_entries({"fn": [("wrap", "Wrap “text”.")]})
  text = dumps(index)

  assert text == 'initSidebarItems({"fn":[["wrap","Wrap “text”."]]});'
  assert not text.endswith("\n")


@pytest.mark.parametrize(
  "text",
  [
    '  initSidebarItems({"fn":[["wrap",""]]});\n',
    'initSidebarItems({"fn":[["wrap",""]]})',
    'initSidebarItems ( {"fn":[["wrap",""]]} ) ;',
    '{"fn":[["wrap",""]]}',
  ],
)
def test_wrapper_tolerance(text):
  assert loads(text).names("fn") == ["wrap"]


def test_unknown_wrapper_is_rejected():
  with pytest.raises(SidebarFormatError, match="initSidebarItems"):
    loads('initSearchIndex({"fn":[]});')


def test_invalid_json_is_rejected():
  with pytest.raises(SidebarFormatError, match="Invalid JSON"):
    loads('initSidebarItems({"fn":[["wrap",]]});')


def test_structural_errors_surface_as_validation_errors():
  with pytest.raises(SidebarValidationError) as exc:
    loads('initSidebarItems({"fn":[["wrap",null],["wrap","x"]]});')

  codes = [issue.code for issue in exc.value.issues]
  assert "bad_summary" in codes
  assert "duplicate_name" in codes


def test_decode_preserves_key_order():
  raw = decode('initSidebarItems({"trait":[],"fn":[]});')
  assert list(raw.keys()) == ["trait", "fn"]


_identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,12}", fullmatch=True)


@given(
  st.dictionaries(
    st.sampled_from([c.value for c in ItemCategory]),
    st.lists(st.tuples(_identifiers, st.text(max_size=30)), max_size=6, unique_by=lambda pair: pair[0]),
  )
)
def test_parse_then_serialize_preserves_order(payload):
  """Any canonical payload survives loads/dumps unchanged."""
  canonical = "initSidebarItems(" + json.dumps(
    {k: [list(p) for p in v] for k, v in payload.items()}, separators=(",", ":"), ensure_ascii=False
  ) + ");"

  assert dumps(loads(canonical)) == canonical


def test_load_rejects_invalid_utf8(tmp_path):
  path = tmp_path / "sidebar-items.js"
  path.write_bytes(b'initSidebarItems({"fn":[["wrap","\xff"]]});')

  with pytest.raises(SidebarFormatError, match="not valid UTF-8"):
    load(path)
