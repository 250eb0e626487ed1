"""
Link Destination Filters.

Documentation sources cross-reference each other with relative ``.md`` links,
while the published site serves ``.html`` pages. The helpers here rewrite such
destinations and leave absolute URLs (anything with a scheme) untouched.
"""

import posixpath
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Callable, Optional
from urllib.parse import urlsplit


def is_relative_url(dest: str) -> bool:
  """
  Checks whether a link destination lacks a URL scheme.

  Args:
      dest (str): Link destination as written in the source.

  Returns:
      bool: True for ``./a.md``, ``../b.md#x``; False for ``https://...``, ``mailto:...``.
  """
  try:
    return not urlsplit(dest).scheme
  except ValueError:
    return False


class LinkFilter(ABC):
  """A filter to optionally apply to link destinations."""

  @abstractmethod
  def apply(self, dest: str) -> Optional[str]:
    """
    Optionally translate the given destination.

    Args:
        dest (str): Original destination.

    Returns:
        Optional[str]: The replacement, or None to keep the original.
    """


class ChangeExtLinkFilter(LinkFilter):
  """
  Re-targets relative links with one extension to another extension.

  The destination is resolved against `base`, normalized, and given the new
  extension, e.g. base ``guide`` + ``../api/wrap.md`` -> ``api/wrap.html``.

  Attributes:
      base (str): POSIX directory the destinations are relative to.
      is_dest (Callable[[str], bool]): Predicate selecting destinations to rewrite.
      expected (str): Extension (without dot) a destination must have.
      ext (str): Replacement extension (without dot).
  """

  def __init__(self, base: str, is_dest: Callable[[str], bool], expected: str, ext: str):
    self.base = base
    self.is_dest = is_dest
    self.expected = expected
    self.ext = ext

  def apply(self, dest: str) -> Optional[str]:
    if not is_relative_url(dest):
      return None

    path = PurePosixPath(dest)
    if not self.is_dest(dest) or path.suffix[1:] != self.expected:
      return None

    resolved = posixpath.normpath(posixpath.join(self.base, dest))
    return str(PurePosixPath(resolved).with_suffix(f".{self.ext}"))


def translate_relative_link(directory: Path, dest: str, is_file: Callable[[Path], bool]) -> Optional[str]:
  """
  Translates a relative ``.md`` link to ``.html`` if it points at a real file.

  Components other than the last are kept exactly as written (``./`` included)
  and a ``#fragment`` is carried over.

  Args:
      directory (Path): Directory of the page containing the link.
      dest (str): Link destination.
      is_file (Callable[[Path], bool]): Existence check for the resolved source file.

  Returns:
      Optional[str]: The rewritten destination, or None if not applicable.
  """
  if not is_relative_url(dest):
    return None

  target, sep, fragment = dest.partition("#")
  if not target or not is_file(directory / target):
    return None

  components = target.split("/")
  stem, dot, extension = components[-1].rpartition(".")
  if not dot or extension != "md":
    return None

  components[-1] = f"{stem}.html"
  return "/".join(components) + sep + fragment
