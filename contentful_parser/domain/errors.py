"""Decode error kinds.

Every required-value failure surfaces as a single `DecodeError` carrying
the JSON path that failed and what was expected there.
"""

from typing import Any, Sequence


def format_path(path: Sequence[Any]) -> str:
    """Render a key path as a dotted string ('items.0.sys.id')."""
    return '.'.join(str(p) for p in path) or '<root>'


class DecodeError(Exception):
    """Base class for payload decode failures."""

    def __init__(self, path: Sequence[Any], expected: Any) -> None:
        super().__init__(tuple(path), expected)
        self.path = tuple(path)
        self.expected = expected

    def __str__(self) -> str:
        return f"{self.describe()} at '{format_path(self.path)}'"

    def describe(self) -> str:
        return f"cannot decode {self.expected}"

    def within(self, *prefix: Any) -> 'DecodeError':
        """Re-anchor the error path below `prefix` (e.g. 'items', 3)."""
        self.path = tuple(prefix) + self.path
        return self


class MissingKey(DecodeError):
    """A required JSON path is absent."""

    def describe(self) -> str:
        return f"missing key (expected {self.expected})"


class TypeMismatch(DecodeError):
    """A value is present but has the wrong shape."""

    def __init__(self, path: Sequence[Any], expected: Any, actual: Any = None) -> None:
        super().__init__(path, expected)
        self.actual = actual

    def describe(self) -> str:
        return f"expected {self.expected}, got {type(self.actual).__name__}"


class UnknownResourceKind(TypeMismatch):
    """A `sys.type` no decoder handles."""

    def describe(self) -> str:
        return f"unknown resource type {self.actual!r} (expected {self.expected})"


class InvalidURL(DecodeError):
    """An asset URL that does not form a well-formed absolute URL."""

    def __init__(self, path: Sequence[Any], url: str) -> None:
        super().__init__(path, 'absolute URL')
        self.url = url

    def describe(self) -> str:
        return f"invalid URL {self.url!r}"
