"""Payload reader for Contentful JSON responses."""
import json
from typing import Any


class PayloadReadError(Exception):
    """Error reading payload."""
    pass


class PayloadReader:
    """Reads Contentful JSON payloads from files or text."""

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def read(self, path: str) -> dict[str, Any]:
        """Read a payload file."""
        try:
            with open(path, encoding=self.encoding) as f:
                text = f.read()
        except OSError as e:
            raise PayloadReadError(f"Failed to read payload: {e}")
        return self.loads(text)

    def loads(self, text: str) -> dict[str, Any]:
        """Parse payload text; the top level must be a JSON object."""
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise PayloadReadError(f"Invalid JSON payload: {e}")
        if not isinstance(payload, dict):
            raise PayloadReadError(
                f"Payload must be a JSON object, got {type(payload).__name__}"
            )
        return payload
