"""CLI handlers for HTML rendering (sidebar blocks and markdown pages)."""

from pathlib import Path
from typing import Optional

from docsidebar.core.codec import load, read_text
from docsidebar.errors import SidebarFormatError, SidebarValidationError
from docsidebar.rendering.markdown import render_markdown
from docsidebar.rendering.sidebar import SidebarRenderer
from docsidebar.utils.console import log_error, log_success


def _emit(content: str, out: Optional[Path]) -> int:
  if out is None:
    print(content, end="")
    return 0
  try:
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to write {out}: {e}")
    return 1
  log_success(f"HTML saved to [path]{out}[/path]")
  return 0


def handle_render(path: Path, module_name: str, base_url: str, out: Optional[Path], listing: bool = False) -> int:
  """
  Handles 'render' command.

  Args:
      path (Path): Payload file to render.
      module_name (str): Sidebar heading.
      base_url (str): Prefix for item page links.
      out (Optional[Path]): Destination; stdout if None.
      listing (bool): Render the module item table instead of the nav block.

  Returns:
      int: Exit code.
  """
  try:
    index = load(path)
  except OSError as e:
    log_error(f"Could not read {path}: {e}")
    return 1
  except (SidebarFormatError, SidebarValidationError) as e:
    log_error(f"{path}: {e}")
    return 1

  renderer = SidebarRenderer(base_url=base_url)
  html = renderer.render_listing(index) if listing else renderer.render_html(index, module_name)
  return _emit(html, out)


def handle_markdown(path: Path, out: Optional[Path], curly_quotes: bool) -> int:
  """
  Handles 'markdown' command.

  Relative ``.md`` links are rewritten to ``.html`` when the target file exists
  next to the source page.

  Args:
      path (Path): Markdown source page.
      out (Optional[Path]): Destination; stdout if None.
      curly_quotes (bool): Convert straight quotes in prose.

  Returns:
      int: Exit code.
  """
  try:
    text = read_text(path)
  except OSError as e:
    log_error(f"Could not read {path}: {e}")
    return 1
  except SidebarFormatError as e:
    log_error(str(e))
    return 1

  html = render_markdown(text, path=path, curly_quotes=curly_quotes)
  return _emit(html, out)
