"""
Tests for the markdown page renderer.

Verifies:
1. Straight quotes are kept unless curly quotes are requested.
2. Curly quotes never apply inside inline code or code blocks.
3. Code block info strings lose their whitespace.
4. Relative .md links are rewritten only when the target file exists.
"""

from pathlib import Path

import pytest

from docsidebar.rendering.markdown import clean_codeblock_header, convert_quotes_to_curly, render_markdown


def never_a_file(_: Path) -> bool:
  return False


def test_keeps_quotes_straight_by_default():
  assert render_markdown("'one'", None, never_a_file, False) == "<p>'one'</p>\n"


def test_curly_quotes_skip_code():
  text = "\n'one'\n```\n'two'\n```\n`'three'` 'four'"
  expected = "<p>‘one’</p>\n<pre><code>'two'\n</code></pre>\n<p><code>'three'</code> ‘four’</p>\n"

  assert render_markdown(text, None, never_a_file, True) == expected


@pytest.mark.parametrize("curly", [False, True])
def test_whitespace_outside_codeblock_header_is_preserved(curly):
  text = "\nsome text with spaces\n```rust\nfn main() {\n// code inside is unchanged\n}\n```\nmore text with spaces\n"
  expected = (
    "<p>some text with spaces</p>\n"
    '<pre><code class="language-rust">fn main() {\n// code inside is unchanged\n}\n</code></pre>\n'
    "<p>more text with spaces</p>\n"
  )

  assert render_markdown(text, None, never_a_file, curly) == expected


@pytest.mark.parametrize(
  "info,css",
  [
    ("rust", "language-rust"),
    ("rust,no_run,should_panic,property_3", "language-rust,no_run,should_panic,property_3"),
    ("rust,    no_run,,,should_panic , ,property_3", "language-rust,no_run,,,should_panic,,property_3"),
  ],
)
def test_codeblock_properties_become_single_class(info, css):
  text = f"\n```{info}\n```\n"
  assert render_markdown(text, None, never_a_file, False) == f'<pre><code class="{css}"></code></pre>\n'


def test_relative_md_links_rewritten_when_file_exists():
  text = "\n[foo](./bar.md)\n[foo](./baz.md)\n"
  page = Path("./index.md")
  bar = page.parent / "./bar.md"

  html = render_markdown(text, page, lambda p: p == bar, False)

  assert html == '<p><a href="./bar.html">foo</a>\n<a href="./baz.md">foo</a></p>\n'


def test_links_untouched_without_page_path():
  html = render_markdown("[foo](bar.md)", None, lambda p: True, False)
  assert 'href="bar.md"' in html


def test_absolute_links_untouched():
  html = render_markdown("[docs](https://example.com/guide.md)", Path("page.md"), lambda p: True, False)
  assert 'href="https://example.com/guide.md"' in html


def test_tables_and_footnotes_enabled():
  text = "| a | b |\n|---|---|\n| 1 | 2 |\n\nSee note[^1].\n\n[^1]: The note.\n"
  html = render_markdown(text, None, never_a_file, False)

  assert "<table>" in html
  assert "<td>1</td>" in html
  assert 'class="footnote-ref"' in html
  assert "The note." in html


def test_rendering_real_files(tmp_path):
  (tmp_path / "chapter.md").write_text("# Chapter\n", encoding="utf-8")
  page = tmp_path / "index.md"
  page.write_text("[next](chapter.md#start) and [gone](missing.md)\n", encoding="utf-8")

  html = render_markdown(page.read_text(encoding="utf-8"), page)

  assert 'href="chapter.html#start"' in html
  assert 'href="missing.md"' in html


class TestConvertQuotesToCurly:
  def test_single_quotes(self):
    assert convert_quotes_to_curly("'one', 'two'") == "‘one’, ‘two’"

  def test_double_quotes(self):
    assert convert_quotes_to_curly('"one", "two"') == "“one”, “two”"

  def test_tab_counts_as_whitespace(self):
    assert convert_quotes_to_curly("\t'one'") == "\t‘one’"

  def test_apostrophe_closes(self):
    assert convert_quotes_to_curly("don't") == "don’t"


def test_clean_codeblock_header():
  assert clean_codeblock_header(" rust ,\tno_run ") == "rust,no_run"
