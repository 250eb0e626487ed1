"""
Sphinx Extension for docsidebar.

Registers the `docsidebar` directive and a build hook that writes
``sidebar-items.js`` payloads for the packages listed in
``docsidebar_packages``.
"""

from typing import Any, Dict

from docsidebar import __version__
from docsidebar.sphinx_ext.directive import SidebarDirective
from docsidebar.sphinx_ext.hooks import write_sidebar_payloads


def setup(app: Any) -> Dict[str, Any]:
  """
  Sphinx Extension Setup Hook.
  """
  app.add_config_value("docsidebar_packages", [], "html")
  app.add_config_value("docsidebar_output_dir", "_static/sidebar", "html")

  app.add_directive("docsidebar", SidebarDirective)

  app.connect("build-finished", write_sidebar_payloads)

  return {
    "version": __version__,
    "parallel_read_safe": True,
    "parallel_write_safe": True,
  }
