"""HTML rendering for sidebars and the markdown pages they link to."""

from docsidebar.rendering.link_filter import ChangeExtLinkFilter, LinkFilter, translate_relative_link
from docsidebar.rendering.markdown import convert_quotes_to_curly, render_markdown
from docsidebar.rendering.sidebar import SidebarRenderer

__all__ = [
  "ChangeExtLinkFilter",
  "LinkFilter",
  "SidebarRenderer",
  "convert_quotes_to_curly",
  "render_markdown",
  "translate_relative_link",
]
