import os
import sys
from datetime import datetime

# -- Project information -----------------------------------------------------
project = "docsidebar"
author = "docsidebar contributors"
copyright = f"{datetime.now().year}, {author}"
version = "0.0.1"
release = version

# -- Path setup --------------------------------------------------------------
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

# -- General configuration ---------------------------------------------------
extensions = [
  "sphinx.ext.autodoc",
  "sphinx.ext.napoleon",
  "myst_parser",
  "docsidebar.sphinx_ext",
]

# -- docsidebar Configuration ------------------------------------------------
# Writes _static/sidebar/<package>/sidebar-items.js after each HTML build
docsidebar_packages = ["docsidebar"]
docsidebar_output_dir = "_static/sidebar"

# -- MyST Parser Configuration -----------------------------------------------
myst_enable_extensions = [
  "colon_fence",
  "deflist",
  "smartquotes",
]
myst_heading_anchors = 3

html_title = "docsidebar"
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
