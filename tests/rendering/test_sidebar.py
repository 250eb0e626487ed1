"""
Tests for SidebarRenderer.

Verifies:
1. Nav block structure: one section per category, in index order.
2. Item links and escaped tooltips.
3. Intra-doc reference resolution in summaries.
"""

import pytest

from docsidebar.core.codec import loads
from docsidebar.core.models import SidebarIndex
from docsidebar.rendering.sidebar import SidebarRenderer


@pytest.fixture
def index(textwrap_sidebar_text):
  return loads(textwrap_sidebar_text)


def test_nav_structure(index):
  html = SidebarRenderer().render_html(index, "textwrap")

  assert html.startswith('<nav class="sidebar">\n  <h2 class="location">textwrap</h2>')
  assert html.index("<h3>Functions</h3>") < html.index("<h3>Structs</h3>") < html.index("<h3>Traits</h3>")
  assert '<section class="sidebar-items" data-category="trait">' in html
  assert html.endswith("</nav>\n")


def test_item_links(index):
  html = SidebarRenderer(base_url="/api/").render_html(index)

  assert '<a class="fn" href="/api/fn.wrap.html"' in html
  assert '<a class="struct" href="/api/struct.Wrapper.html"' in html
  assert '<a class="trait" href="/api/trait.WordSplitter.html" title="An interface for splitting words.">' in html
  assert '<h2 class="location">' not in html


def test_titles_are_escaped():
  index = SidebarIndex.from_entries({"fn": [("wrap", 'Wrap <text> & "quotes"')]})
  html = SidebarRenderer().render_html(index)

  assert 'title="Wrap &lt;text&gt; &amp; &quot;quotes&quot;"' in html


def test_resolve_intra_doc_links(index):
  renderer = SidebarRenderer()
  summary = index.find("struct", "Wrapper").summary

  resolved = renderer.resolve_intra_doc_links(summary, index)

  assert "[`wrap`](fn.wrap.html)" in resolved
  assert "[`fill`](fn.fill.html)" in resolved


def test_member_reference_keeps_anchor(index):
  html = SidebarRenderer().render_summary(index.find("struct", "NoHyphenation").summary, index)

  assert '<a href="struct.Wrapper.html#splitter"><code>Wrapper.splitter</code></a>' in html


def test_unknown_reference_left_literal(index):
  html = SidebarRenderer().render_summary("See [`Missing`] for details.", index)
  assert html == "See [<code>Missing</code>] for details."


def test_existing_links_not_double_resolved(index):
  renderer = SidebarRenderer()
  text = "Use [`wrap`](https://example.com) instead."
  assert renderer.resolve_intra_doc_links(text, index) == text


def test_listing_renders_summaries(index):
  html = SidebarRenderer().render_listing(index)

  assert '<h2 id="fns">Functions</h2>' in html
  assert '<dt><a class="fn" href="fn.dedent.html">dedent</a></dt>' in html
  assert "<dd>Removes common leading whitespace from each line.</dd>" in html
  assert '<a href="fn.wrap.html"><code>wrap</code></a>' in html


def test_empty_index_renders_empty_nav():
  assert SidebarRenderer().render_html(SidebarIndex()) == '<nav class="sidebar">\n</nav>\n'
