"""Base class for resource decoders."""

from abc import ABC, abstractmethod
from typing import Any

from contentful_parser.domain.enums import ResourceKind, ValueShape
from contentful_parser.domain.models import DecodeOptions
from contentful_parser.domain.value_extractor import Path, extract, extract_optional


class BaseDecoder(ABC):
    """Turns one raw JSON object into a typed value.

    Subclasses set `kind` and implement `decode`. Decoders are pure: the
    raw object is read, never modified.
    """

    kind: ResourceKind

    def __init__(self, options: DecodeOptions | None = None) -> None:
        self.options = options or DecodeOptions()

    @abstractmethod
    def decode(self, raw: Any) -> Any:
        """Decode raw into the decoder's model, raising DecodeError on failure."""

    # ── Helpers ─────────────────────────────────────────────────────────

    @staticmethod
    def _get_sys(raw: Any) -> dict[str, Any]:
        return extract(raw, 'sys', ValueShape.OBJECT)

    @staticmethod
    def _get_str(raw: Any, path: Path) -> str:
        return extract(raw, path, ValueShape.STRING)

    @staticmethod
    def _get_optional_str(raw: Any, path: Path) -> str | None:
        return extract_optional(raw, path, None, ValueShape.STRING)

    @staticmethod
    def _get_flag(raw: Any, path: Path) -> bool:
        return extract_optional(raw, path, False, ValueShape.BOOLEAN)
