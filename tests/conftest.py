"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Paths to the bundled textwrap sidebar fixture.
- Registry and console isolation so tests cannot leak global state.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'docsidebar' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from docsidebar.core.registry import clear_registry  # noqa: E402
from docsidebar.utils.console import reset_console  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def textwrap_sidebar_path() -> Path:
  """Path to the textwrap ``sidebar-items.js`` exactly as generated."""
  return FIXTURES_DIR / "textwrap" / "sidebar-items.js"


@pytest.fixture
def textwrap_sidebar_text(textwrap_sidebar_path) -> str:
  return textwrap_sidebar_path.read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def isolate_sidebar_registry():
  """
  Ensures registrations made by one test are not visible to the next.
  """
  clear_registry()
  yield
  clear_registry()


@pytest.fixture(autouse=True)
def isolate_console():
  """Restores the default stderr console after tests that swap it."""
  yield
  reset_console()
