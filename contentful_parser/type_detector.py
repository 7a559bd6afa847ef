"""Resource kind detection for raw Contentful payloads."""

from dataclasses import dataclass
from typing import Any

from contentful_parser.domain.constants import ARRAY_TYPE, LINK_TYPE, SYS_TYPE
from contentful_parser.domain.enums import ResourceKind, ValueShape
from contentful_parser.domain.value_extractor import extract_optional


@dataclass
class TypeDetectionResult:
    kind: ResourceKind | None
    raw_type: str
    is_collection: bool
    is_link: bool
    is_unknown: bool


class TypeDetector:
    """Determines the resource kind of a payload from its `sys.type`."""

    TYPE_KIND_MAP = {
        'Asset': ResourceKind.ASSET,
        'Entry': ResourceKind.ENTRY,
        'ContentType': ResourceKind.CONTENT_TYPE,
        'Space': ResourceKind.SPACE,
        'Locale': ResourceKind.LOCALE,
    }

    def detect(self, raw: Any) -> TypeDetectionResult:
        raw_type = extract_optional(raw, SYS_TYPE, '', ValueShape.STRING)

        if raw_type == ARRAY_TYPE:
            return TypeDetectionResult(None, raw_type, True, False, False)
        if raw_type == LINK_TYPE:
            return TypeDetectionResult(None, raw_type, False, True, False)

        kind = self.TYPE_KIND_MAP.get(raw_type)
        if kind:
            return TypeDetectionResult(kind, raw_type, False, False, False)

        # Locales listed by the management API carry no sys.type
        if raw_type == '' and isinstance(raw, dict) and 'code' in raw and 'name' in raw:
            return TypeDetectionResult(ResourceKind.LOCALE, raw_type, False, False, False)

        return TypeDetectionResult(None, raw_type or 'unknown', False, False, True)
