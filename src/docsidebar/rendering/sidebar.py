"""
Sidebar HTML Renderer.

Turns a :class:`SidebarIndex` into the static HTML the documentation browser
would otherwise build client-side from ``initSidebarItems``:

*   a ``<nav>`` block with one section per category (used in the page sidebar);
*   an item listing with rendered summaries (used on the module page).

Summaries may contain inline markdown and intra-doc references such as
``[`wrap`]`` or ``[`Wrapper.splitter`]``; references to items present in the
index are turned into links, unknown ones are left as written.
"""

import html
import re
from typing import Optional

from markdown_it import MarkdownIt

from docsidebar.core.models import SidebarIndex

_INTRA_DOC_RE = re.compile(r"\[`(?P<item>[A-Za-z_][A-Za-z0-9_]*)(?:\.(?P<member>[A-Za-z_][A-Za-z0-9_]*))?`\](?![\[(])")


class SidebarRenderer:
  """
  Renders sidebar navigation and item listings.

  Attributes:
      base_url (str): Prefix prepended to every item page link (e.g. "/textwrap/").
  """

  def __init__(self, base_url: str = ""):
    self.base_url = base_url
    self._md = MarkdownIt("commonmark")

  def item_href(self, index: SidebarIndex, name: str, member: Optional[str] = None) -> Optional[str]:
    """
    Resolves the page link of an item.

    Args:
        index (SidebarIndex): Index used to find the item's category.
        name (str): Item identifier.
        member (Optional[str]): Field/method anchor inside the item page.

    Returns:
        Optional[str]: ``<base_url><prefix>.<name>.html[#member]``, or None if unknown.
    """
    found = index.locate(name)
    if found is None:
      return None
    category, _ = found
    href = f"{self.base_url}{category.page_name(name)}"
    return f"{href}#{member}" if member else href

  def resolve_intra_doc_links(self, summary: str, index: SidebarIndex) -> str:
    """
    Rewrites ``[`Name`]`` references into inline markdown links.

    Args:
        summary (str): Raw summary.
        index (SidebarIndex): Items available as link targets.

    Returns:
        str: Markdown with known references linked.
    """

    def _replace(match: re.Match) -> str:
      href = self.item_href(index, match.group("item"), match.group("member"))
      if href is None:
        return match.group(0)
      return f"{match.group(0)}({href})"

    return _INTRA_DOC_RE.sub(_replace, summary)

  def render_summary(self, summary: str, index: SidebarIndex) -> str:
    """
    Renders a summary's inline markdown to HTML.

    Args:
        summary (str): Raw one-line summary.
        index (SidebarIndex): Items available as link targets.

    Returns:
        str: Inline HTML (no wrapping paragraph).
    """
    return self._md.renderInline(self.resolve_intra_doc_links(summary, index))

  def render_html(self, index: SidebarIndex, module_name: str = "") -> str:
    """
    Generates the ``<nav>`` sidebar block.

    Args:
        index (SidebarIndex): The index to render, in display order.
        module_name (str): Heading shown above the sections (omitted if empty).

    Returns:
        str: HTML string.
    """
    lines = ['<nav class="sidebar">']
    if module_name:
      lines.append(f'  <h2 class="location">{html.escape(module_name)}</h2>')

    for category in index.categories():
      entries = index.entries(category)
      if not entries:
        continue

      lines.append(f'  <section class="sidebar-items" data-category="{category.value}">')
      lines.append(f"    <h3>{category.label}</h3>")
      lines.append("    <ul>")
      for entry in entries:
        href = html.escape(f"{self.base_url}{category.page_name(entry.name)}")
        title = html.escape(entry.summary, quote=True)
        lines.append(f'      <li><a class="{category.value}" href="{href}" title="{title}">{entry.name}</a></li>')
      lines.append("    </ul>")
      lines.append("  </section>")

    lines.append("</nav>")
    return "\n".join(lines) + "\n"

  def render_listing(self, index: SidebarIndex) -> str:
    """
    Generates the module-page item table with rendered summaries.

    Args:
        index (SidebarIndex): The index to render.

    Returns:
        str: HTML string with one ``<dl>`` per category.
    """
    blocks = []
    for category in index.categories():
      entries = index.entries(category)
      if not entries:
        continue

      rows = [f'<h2 id="{category.value}s">{category.label}</h2>', '<dl class="item-table">']
      for entry in entries:
        href = html.escape(f"{self.base_url}{category.page_name(entry.name)}")
        rows.append(f'  <dt><a class="{category.value}" href="{href}">{entry.name}</a></dt>')
        rows.append(f"  <dd>{self.render_summary(entry.summary, index)}</dd>")
      rows.append("</dl>")
      blocks.append("\n".join(rows))

    return "\n".join(blocks) + "\n"
