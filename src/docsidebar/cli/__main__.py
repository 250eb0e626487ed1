"""
Main Entry Point for the docsidebar CLI.

This module handles argument parsing, merges CLI flags over the
``[tool.docsidebar]`` configuration, and dispatches to the handlers in
`docsidebar.cli.handlers`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from docsidebar import __version__
from docsidebar.cli import handlers
from docsidebar.config import RuntimeConfig
from docsidebar.utils.console import log_error, set_quiet


def _build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="docsidebar", description="docsidebar: Documentation Sidebar Index Tool")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: BUILD ---
  cmd_build = subparsers.add_parser("build", help="Generate sidebar-items.js from a package's public surface")
  cmd_build.add_argument("package", nargs="?", default=None, help="Package to index (default: from toml)")
  cmd_build.add_argument("--out", type=Path, default=None, help="Output file (default: from toml, else stdout)")
  cmd_build.add_argument(
    "--include-private",
    action="store_true",
    default=None,
    help="Index underscore-prefixed members too (Overrides config)",
  )

  # --- Command: VALIDATE ---
  cmd_val = subparsers.add_parser("validate", help="Check a sidebar-items.js file for structural issues")
  cmd_val.add_argument("path", type=Path, help="Payload file")
  cmd_val.add_argument("--json", action="store_true", help="Print issues as JSON")

  # --- Command: SHOW ---
  cmd_show = subparsers.add_parser("show", help="Display a sidebar index as a table")
  cmd_show.add_argument("path", type=Path, help="Payload file")

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Report drift between an index and the package it documents")
  cmd_check.add_argument("path", type=Path, help="Payload file")
  cmd_check.add_argument("package", nargs="?", default=None, help="Package to compare with (default: from toml)")
  cmd_check.add_argument("--json", action="store_true", help="Print the diff as JSON")
  cmd_check.add_argument("--include-private", action="store_true", default=None)

  # --- Command: RENDER ---
  cmd_render = subparsers.add_parser("render", help="Render a sidebar index to HTML")
  cmd_render.add_argument("path", type=Path, help="Payload file")
  cmd_render.add_argument("--module", default=None, help="Heading shown above the sidebar")
  cmd_render.add_argument("--base-url", default=None, help="Prefix for item page links")
  cmd_render.add_argument("--listing", action="store_true", help="Render the module item table instead")
  cmd_render.add_argument("--out", type=Path, default=None, help="Output HTML file (default: stdout)")

  # --- Command: MARKDOWN ---
  cmd_md = subparsers.add_parser("markdown", help="Render a markdown page, rewriting relative .md links")
  cmd_md.add_argument("path", type=Path, help="Markdown source file")
  cmd_md.add_argument("--out", type=Path, default=None, help="Output HTML file (default: stdout)")
  cmd_md.add_argument("--curly-quotes", action="store_true", default=None, help="Use typographic quotes")

  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  args = _build_parser().parse_args(argv)
  set_quiet(bool(getattr(args, "json", False)))

  try:
    if args.command == "build":
      config = RuntimeConfig.load(package=args.package, output=args.out, include_private=args.include_private)
      if not config.package:
        log_error("No package given and no [tool.docsidebar] package configured.")
        return 2
      return handlers.handle_build(config.package, config.output, config.include_private)

    elif args.command == "validate":
      return handlers.handle_validate(args.path, args.json)

    elif args.command == "show":
      return handlers.handle_show(args.path)

    elif args.command == "check":
      config = RuntimeConfig.load(package=args.package, include_private=args.include_private)
      if not config.package:
        log_error("No package given and no [tool.docsidebar] package configured.")
        return 2
      return handlers.handle_check(args.path, config.package, args.json, config.include_private)

    elif args.command == "render":
      config = RuntimeConfig.load(module_name=args.module, base_url=args.base_url)
      return handlers.handle_render(args.path, config.module_name, config.base_url, args.out, args.listing)

    elif args.command == "markdown":
      config = RuntimeConfig.load(curly_quotes=args.curly_quotes)
      return handlers.handle_markdown(args.path, args.out, config.curly_quotes)

  except ValidationError as e:
    log_error(f"Invalid configuration: {e}")
    return 2
  finally:
    set_quiet(False)

  return 0


if __name__ == "__main__":
  sys.exit(main())
