"""
Markdown Page Renderer.

Renders CommonMark (with tables and footnotes) to HTML using `markdown-it-py`,
the parser behind MyST. The token stream is post-processed before rendering:

1.  **Code block headers**: whitespace is removed from fence info strings, so
    ```` ```rust, no_run ```` renders as ``class="language-rust,no_run"``.
2.  **Relative links**: ``[x](./page.md)`` becomes ``./page.html`` when the
    target exists next to the rendered page.
3.  **Curly quotes** (optional): straight quotes in prose become typographic
    quotes; inline code and code blocks are left untouched.
"""

from pathlib import Path
from typing import Callable, List, Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin

from docsidebar.rendering.link_filter import translate_relative_link

_OPEN_QUOTES = {"'": "‘", '"': "“"}
_CLOSE_QUOTES = {"'": "’", '"': "”"}


def create_parser() -> MarkdownIt:
  """
  Builds the configured markdown-it parser.

  Returns:
      MarkdownIt: CommonMark preset plus tables and footnotes.
  """
  return MarkdownIt("commonmark").enable("table").use(footnote_plugin)


def _is_file(path: Path) -> bool:
  return path.is_file()


def render_markdown(
  text: str,
  path: Optional[Path] = None,
  is_file: Callable[[Path], bool] = _is_file,
  curly_quotes: bool = False,
) -> str:
  """
  Renders a markdown page to HTML.

  Args:
      text (str): Markdown source.
      path (Optional[Path]): Location of the source page. Relative ``.md`` links
          are resolved against its parent directory. If None, links are kept.
      is_file (Callable[[Path], bool]): Existence check for link targets.
      curly_quotes (bool): Convert straight quotes in prose to curly quotes.

  Returns:
      str: HTML fragment.
  """
  md = create_parser()
  env: dict = {}
  tokens = md.parse(text, env)

  directory = path.parent if path is not None else None

  for token in tokens:
    if token.type == "fence":
      token.info = clean_codeblock_header(token.info)
    elif token.type == "inline" and token.children:
      _convert_inline(token.children, directory, is_file, curly_quotes)

  return md.renderer.render(tokens, md.options, env)


def _convert_inline(
  children: List[Token],
  directory: Optional[Path],
  is_file: Callable[[Path], bool],
  curly_quotes: bool,
) -> None:
  for child in children:
    if child.type == "link_open" and directory is not None:
      href = child.attrGet("href")
      if isinstance(href, str):
        translated = translate_relative_link(directory, href, is_file)
        if translated is not None:
          child.attrSet("href", translated)
    elif child.type == "text" and curly_quotes:
      child.content = convert_quotes_to_curly(child.content)
    elif child.type == "image" and child.children:
      _convert_inline(child.children, directory, is_file, curly_quotes)


def clean_codeblock_header(info: str) -> str:
  """
  Removes all whitespace from a fenced code block info string.

  Args:
      info (str): Raw info string, e.g. ``"rust,    no_run"``.

  Returns:
      str: e.g. ``"rust,no_run"``.
  """
  return "".join(ch for ch in info if not ch.isspace())


def convert_quotes_to_curly(original_text: str) -> str:
  """
  Replaces straight quotes with curly quotes.

  A quote opens when it is preceded by whitespace (or starts the text) and
  closes otherwise.

  Args:
      original_text (str): Prose text (never code).

  Returns:
      str: Text with typographic quotes.
  """
  preceded_by_whitespace = True
  out = []

  for ch in original_text:
    if ch in _OPEN_QUOTES:
      out.append(_OPEN_QUOTES[ch] if preceded_by_whitespace else _CLOSE_QUOTES[ch])
    else:
      out.append(ch)
    preceded_by_whitespace = ch.isspace()

  return "".join(out)
