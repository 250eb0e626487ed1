"""
docsidebar Package.

Builds, validates and renders documentation sidebar indexes: the
``sidebar-items.js`` payloads a documentation browser loads through a single
``initSidebarItems({...});`` call to populate its navigation.

Usage
-----

Reading and writing a payload
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import docsidebar

    index = docsidebar.load("textwrap/sidebar-items.js")
    assert ("fn", "wrap") in index
    print(index.names("struct"))
    # ['HyphenSplitter', 'NoHyphenation', 'Wrapper']

    docsidebar.dump(index, "out/sidebar-items.js")

Building from a Python package
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    index = docsidebar.build("textwrap")
    print(docsidebar.dumps(index))
"""

__version__ = "0.0.1"

from docsidebar.core.codec import dump, dumps, load, loads
from docsidebar.core.models import SidebarEntry, SidebarIndex
from docsidebar.core.registry import init_sidebar_items
from docsidebar.enums import ItemCategory
from docsidebar.errors import RegistrationError, SidebarFormatError, SidebarValidationError


def build(package: str, include_private: bool = False) -> SidebarIndex:
  """
  Inspects a package and returns its sidebar index.

  This is a convenience wrapper around `SurfaceInspector`.

  Args:
      package (str): Importable package name.
      include_private (bool): Index underscore-prefixed members too.

  Returns:
      SidebarIndex: Sorted index of the package's public functions, classes and interfaces.
  """
  from docsidebar.discovery.inspector import SurfaceInspector

  return SurfaceInspector(include_private=include_private).inspect(package)


__all__ = [
  "ItemCategory",
  "RegistrationError",
  "SidebarEntry",
  "SidebarFormatError",
  "SidebarIndex",
  "SidebarValidationError",
  "__version__",
  "build",
  "dump",
  "dumps",
  "init_sidebar_items",
  "load",
  "loads",
]
