from .build import handle_build
from .check import handle_check
from .render import handle_markdown, handle_render
from .validate import handle_show, handle_validate

__all__ = [
  "handle_build",
  "handle_check",
  "handle_markdown",
  "handle_render",
  "handle_show",
  "handle_validate",
]
