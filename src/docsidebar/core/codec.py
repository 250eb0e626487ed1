"""
Codec for ``sidebar-items.js`` Payloads.

The documentation browser loads a script consisting of a single call::

    initSidebarItems({"fn":[["wrap","Wrap a line of text..."]],"struct":[...]});

`dumps` emits exactly that canonical form (compact separators, literal
non-ASCII, no trailing newline), so ``dumps(loads(text)) == text`` for any
payload produced by the generator.
"""

import json
import re
from pathlib import Path
from typing import Any, Union

from docsidebar.core.models import SidebarIndex
from docsidebar.errors import SidebarFormatError

INIT_FUNCTION = "initSidebarItems"

_CALL_RE = re.compile(r"^\s*" + INIT_FUNCTION + r"\s*\((?P<body>.*)\)\s*;?\s*$", re.DOTALL)


def extract_json(text: str) -> str:
  """
  Strips the ``initSidebarItems(...)`` wrapper.

  A bare JSON object is returned unchanged.

  Args:
      text (str): Script or JSON text.

  Returns:
      str: The JSON argument text.

  Raises:
      SidebarFormatError: If the text is neither a wrapped call nor a JSON object.
  """
  match = _CALL_RE.match(text)
  if match:
    return match.group("body")

  stripped = text.strip()
  if stripped.startswith("{"):
    return stripped

  head = stripped[:40] + ("..." if len(stripped) > 40 else "")
  raise SidebarFormatError(f"Expected '{INIT_FUNCTION}({{...}});', found: {head!r}")


def decode(text: str) -> Any:
  """
  Parses the payload JSON without structural validation.

  Args:
      text (str): Script or JSON text.

  Returns:
      Any: The decoded object (key order preserved).

  Raises:
      SidebarFormatError: On wrapper or JSON syntax errors.
  """
  body = extract_json(text)
  try:
    return json.loads(body)
  except json.JSONDecodeError as e:
    raise SidebarFormatError(f"Invalid JSON payload at line {e.lineno}, column {e.colno}: {e.msg}") from e


def loads(text: str) -> SidebarIndex:
  """
  Parses and validates a sidebar payload.

  Args:
      text (str): Contents of ``sidebar-items.js``.

  Returns:
      SidebarIndex: The index, in payload order.

  Raises:
      SidebarFormatError: If the wrapper or JSON is malformed.
      SidebarValidationError: If the structure is invalid.
  """
  return SidebarIndex.from_payload(decode(text))


def encode_json(index: SidebarIndex) -> str:
  return json.dumps(index.to_payload(), separators=(",", ":"), ensure_ascii=False)


def dumps(index: SidebarIndex) -> str:
  """
  Serializes an index to the canonical script form.

  Args:
      index (SidebarIndex): The index to write.

  Returns:
      str: ``initSidebarItems({...});`` with no trailing newline.
  """
  return f"{INIT_FUNCTION}({encode_json(index)});"


def read_text(path: Union[str, Path]) -> str:
  """
  Reads a UTF-8 source file.

  Args:
      path: File to read.

  Returns:
      str: The decoded contents.

  Raises:
      OSError: If the file cannot be read.
      SidebarFormatError: If the bytes are not valid UTF-8.
  """
  data = Path(path).read_bytes()
  try:
    return data.decode("utf-8")
  except UnicodeDecodeError as e:
    raise SidebarFormatError(f"{path} is not valid UTF-8 (byte {e.start}): {e.reason}") from e


def load(path: Union[str, Path]) -> SidebarIndex:
  """Reads a ``sidebar-items.js`` file (UTF-8)."""
  return loads(read_text(path))


def dump(index: SidebarIndex, path: Union[str, Path]) -> Path:
  """
  Writes an index to disk, creating parent directories.

  Args:
      index (SidebarIndex): The index to write.
      path: Destination file.

  Returns:
      Path: The written path.
  """
  out = Path(path)
  out.parent.mkdir(parents=True, exist_ok=True)
  # newline="" keeps the payload byte-identical on every platform
  with open(out, "w", encoding="utf-8", newline="") as f:
    f.write(dumps(index))
  return out
