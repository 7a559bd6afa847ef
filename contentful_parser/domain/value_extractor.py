"""Typed value extraction from raw JSON trees.

Supports paths like:
  - 'name'                 → simple key
  - 'fields.file.url'      → nested objects
  - 'items.0.sys.id'       → list index (digit segments index into arrays)
  - ('fields', 'a.b')      → key sequence, for keys that contain dots
"""

from typing import Any, Sequence

from contentful_parser.domain.enums import ValueShape
from contentful_parser.domain.errors import MissingKey, TypeMismatch

Path = str | Sequence[Any]


def split_path(path: Path) -> tuple[Any, ...]:
    """Normalize a dotted string or key sequence into a key tuple."""
    if isinstance(path, str):
        return tuple(path.split('.')) if path else ()
    return tuple(path)


def extract(root: Any, path: Path, shape: ValueShape = ValueShape.ANY) -> Any:
    """Follow path through root and return the value found there.

    Args:
        root: Parsed JSON value to walk.
        path: Dotted path or key sequence.
        shape: Shape the final value must have.

    Returns:
        The value, checked against `shape`; integers satisfy NUMBER as they are.

    Raises:
        MissingKey: A key along the path is absent.
        TypeMismatch: A step walks into a scalar, or the value has the wrong shape.
    """
    keys = split_path(path)
    node = root
    for idx, key in enumerate(keys):
        node = _step(node, key, keys[:idx + 1], shape)
    return _coerce(node, keys, shape)


def extract_optional(
    root: Any,
    path: Path,
    default: Any = None,
    shape: ValueShape = ValueShape.ANY,
) -> Any:
    """Like `extract`, but returns default when the value is absent or mistyped."""
    try:
        return extract(root, path, shape)
    except (MissingKey, TypeMismatch):
        return default


def _step(node: Any, key: Any, walked: tuple, shape: ValueShape) -> Any:
    if isinstance(node, dict):
        if key not in node:
            raise MissingKey(walked, shape.value)
        return node[key]
    if isinstance(node, list):
        index = _as_index(key)
        if index is None:
            raise TypeMismatch(walked[:-1], ValueShape.OBJECT.value, node)
        if not -len(node) <= index < len(node):
            raise MissingKey(walked, shape.value)
        return node[index]
    raise TypeMismatch(walked[:-1], 'object or array', node)


def _as_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.lstrip('-').isdigit():
        return int(key)
    return None


def _coerce(value: Any, keys: tuple, shape: ValueShape) -> Any:
    if shape is ValueShape.ANY:
        return value
    if shape is ValueShape.STRING and isinstance(value, str):
        return value
    if shape is ValueShape.BOOLEAN and isinstance(value, bool):
        return value
    if shape is ValueShape.INTEGER and isinstance(value, int) and not isinstance(value, bool):
        return value
    if shape is ValueShape.NUMBER and isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if shape is ValueShape.OBJECT and isinstance(value, dict):
        return value
    if shape is ValueShape.ARRAY and isinstance(value, list):
        return value
    raise TypeMismatch(keys, shape.value, value)
