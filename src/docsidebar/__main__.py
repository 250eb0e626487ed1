"""
Entry point for module execution (``python -m docsidebar``).

This module delegates execution to the CLI handler in ``docsidebar.cli.__main__``.
"""

import sys
from docsidebar.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
