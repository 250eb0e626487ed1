"""
Sphinx Build Hooks.

Writes one ``sidebar-items.js`` per configured package into the HTML output
once the build has finished.
"""

from pathlib import Path
from typing import Any, List, Optional

from docsidebar.core.codec import dump
from docsidebar.discovery.inspector import SurfaceInspector
from docsidebar.utils.console import log_success, log_warning


def write_sidebar_payloads(app: Any, exception: Optional[Exception]) -> List[Path]:
  """
  Post-build hook generating sidebar payloads.

  Connected to 'build-finished' event. Output goes to
  ``<outdir>/<docsidebar_output_dir>/<package>/sidebar-items.js``.

  Args:
      app: The Sphinx application.
      exception: Set if the build failed, in which case nothing is written.

  Returns:
      List[Path]: Files written.
  """
  if exception or not hasattr(app, "builder"):
    return []

  packages = list(getattr(app.config, "docsidebar_packages", []) or [])
  if not packages:
    return []

  out_root = Path(app.builder.outdir) / app.config.docsidebar_output_dir
  inspector = SurfaceInspector()
  written = []

  for package in packages:
    index = inspector.inspect(package)
    if len(index) == 0:
      log_warning(f"docsidebar: no public items found in '{package}', skipping.")
      continue
    written.append(dump(index, out_root / package / "sidebar-items.js"))

  if written:
    log_success(f"docsidebar: wrote {len(written)} sidebar index(es) under [path]{out_root}[/path]")
  return written
