"""
Sphinx Directive for embedding a rendered sidebar.

Usage::

    .. docsidebar:: _static/textwrap/sidebar-items.js
       :module: textwrap
       :base-url: /api/textwrap/
"""

from pathlib import Path
from typing import List

from docutils import nodes
from docutils.parsers.rst import Directive, directives

from docsidebar.core.codec import load
from docsidebar.errors import SidebarFormatError, SidebarValidationError
from docsidebar.rendering.sidebar import SidebarRenderer


class SidebarDirective(Directive):
  """
  Embeds the HTML navigation block for a ``sidebar-items.js`` file.

  The path argument is resolved against the Sphinx source directory when
  available, otherwise against the current working directory.
  """

  required_arguments = 1
  has_content = False
  option_spec = {
    "module": directives.unchanged,
    "base-url": directives.unchanged,
    "listing": directives.flag,
  }

  def _resolve_path(self) -> Path:
    raw = Path(self.arguments[0])
    if raw.is_absolute():
      return raw
    env = getattr(self.state.document.settings, "env", None)
    srcdir = getattr(env, "srcdir", None)
    return Path(srcdir) / raw if srcdir else raw

  def run(self) -> List[nodes.Node]:
    path = self._resolve_path()
    try:
      index = load(path)
    except (OSError, SidebarFormatError, SidebarValidationError) as e:
      error = self.state_machine.reporter.error(
        f"docsidebar: cannot load {path}: {e}",
        line=self.lineno,
      )
      return [error]

    renderer = SidebarRenderer(base_url=self.options.get("base-url", ""))
    if "listing" in self.options:
      html = renderer.render_listing(index)
    else:
      html = renderer.render_html(index, self.options.get("module", ""))
    return [nodes.raw("", html, format="html")]
