from typing import List, Mapping, Optional, Sequence, Tuple, Union

Headers = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


def normalize_headers(headers: Optional[Headers]) -> List[Tuple[str, str]]:
  # Keep caller order; a mapping iterates in insertion order
  if headers is None:
      return []

  items = headers.items() if isinstance(headers, Mapping) else headers
  normalized = []
  for i, item in enumerate(items):
      if isinstance(item, (str, bytes)):
          raise ValueError(f"Header at index {i} must be a (name, value) pair, got {item!r}")
      try:
          name, value = item
      except (TypeError, ValueError):
          raise ValueError(f"Header at index {i} must be a (name, value) pair, got {item!r}")

      if not isinstance(name, str) or not name:
          raise ValueError(f"Header at index {i} must have a non-empty string name")

      normalized.append((name, str(value)))
  return normalized


def split_header_line(line: str) -> Tuple[str, str]:
  """Split a raw 'Name: value' line; a line without a colon has an empty value."""
  name, _, value = line.partition(":")
  return name.strip(), value.strip()
