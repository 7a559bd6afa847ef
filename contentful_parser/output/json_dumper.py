"""JSON output generation.

Re-encodes decoded resources and collections into wire-shaped JSON. Resolved
links are written back as link stubs, so the output is a flat document of
the same shape the backend delivers, whatever the depth of the graph.
"""

import json
import os
from typing import Any

from contentful_parser.domain.constants import ARRAY_TYPE, INCLUDABLE_KINDS, LINK_TYPE
from contentful_parser.domain.enums import FieldType, FieldValueKind
from contentful_parser.domain.field_values import FieldValue
from contentful_parser.domain.models import (
    Asset,
    ContentType,
    ContentfulArray,
    Entry,
    Field,
    Locale,
    Resource,
    Space,
)


def link_stub(resource: Resource) -> dict[str, Any]:
    """Build the link stub that points at resource."""
    return {'sys': {'type': LINK_TYPE, 'linkType': resource.kind.value, 'id': resource.identifier}}


class JSONDumper:
    """Writes decoded objects as wire-shaped JSON.

    Args:
        pretty: Whether to pretty-print JSON (default True).
    """

    def __init__(self, pretty: bool = True) -> None:
        self._indent = 2 if pretty else None

    def to_dict(self, obj: Any) -> Any:
        """Re-encode a decoded object (resource, locale, field or collection)."""
        if isinstance(obj, ContentfulArray):
            return self._array_to_dict(obj)
        if isinstance(obj, Entry):
            return self._entry_to_dict(obj)
        if isinstance(obj, Asset):
            return {'sys': obj.sys, 'fields': obj.fields}
        if isinstance(obj, ContentType):
            return self._content_type_to_dict(obj)
        if isinstance(obj, Space):
            return {
                'sys': obj.sys,
                'name': obj.name,
                'locales': [self._locale_to_dict(l) for l in obj.locales],
            }
        if isinstance(obj, Locale):
            return self._locale_to_dict(obj)
        if isinstance(obj, Field):
            return self._field_to_dict(obj)
        raise TypeError(f"Cannot dump {type(obj).__name__}")

    def write(self, obj: Any, path: str) -> None:
        """Write the re-encoded object to path."""
        os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
        self._write_json(path, self.to_dict(obj))

    # ── Encoders ────────────────────────────────────────────────────────

    def _array_to_dict(self, array: ContentfulArray) -> dict[str, Any]:
        item_keys = {item.key for item in array.items if isinstance(item, Resource)}
        data: dict[str, Any] = {
            'sys': {'type': ARRAY_TYPE},
            'total': array.total,
            'skip': array.skip,
            'limit': array.limit,
            'items': [self.to_dict(item) for item in array.items],
        }

        includes: dict[str, list] = {}
        for kind in INCLUDABLE_KINDS:
            resources = [
                self.to_dict(r) for key, r in (array.includes or {}).items()
                if r.kind is kind and key not in item_keys
            ]
            if resources:
                includes[kind.value] = resources
        if includes:
            data['includes'] = includes
        return data

    def _entry_to_dict(self, entry: Entry) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if isinstance(entry.sys.get('locale'), str):
            for name, value in entry.localized_fields.get(entry.locale, {}).items():
                fields[name] = self._encode_value(value)
        else:
            for locale, bucket in entry.localized_fields.items():
                for name, value in bucket.items():
                    fields.setdefault(name, {})[locale] = self._encode_value(value)
        return {'sys': entry.sys, 'fields': fields}

    @staticmethod
    def _encode_value(value: FieldValue) -> Any:
        if value.kind is FieldValueKind.RESOURCE:
            return link_stub(value.value)
        if value.kind is FieldValueKind.RESOURCE_SEQUENCE:
            return [link_stub(r) for r in value.value]
        return value.value

    def _content_type_to_dict(self, content_type: ContentType) -> dict[str, Any]:
        data: dict[str, Any] = {
            'sys': content_type.sys,
            'name': content_type.name,
            'fields': [self._field_to_dict(f) for f in content_type.fields],
        }
        if content_type.description is not None:
            data['description'] = content_type.description
        if content_type.display_field is not None:
            data['displayField'] = content_type.display_field
        return data

    @staticmethod
    def _field_to_dict(field: Field) -> dict[str, Any]:
        data: dict[str, Any] = {
            'id': field.identifier,
            'name': field.name,
            'type': field.type.value,
            'disabled': field.disabled,
            'localized': field.localized,
            'required': field.required,
        }
        if field.type is FieldType.ARRAY:
            items: dict[str, Any] = {}
            if field.item_type is not FieldType.NONE:
                items['type'] = field.item_type.value
            if field.link_type is not FieldType.NONE:
                items['linkType'] = field.link_type.value
            data['items'] = items
        elif field.link_type is not FieldType.NONE:
            data['linkType'] = field.link_type.value
        return data

    @staticmethod
    def _locale_to_dict(locale: Locale) -> dict[str, Any]:
        data: dict[str, Any] = {'code': locale.code, 'name': locale.name, 'default': locale.is_default}
        if locale.fallback_code is not None:
            data['fallbackCode'] = locale.fallback_code
        return data

    def _write_json(self, path: str, data: Any) -> None:
        """Write data as JSON to a file."""
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=self._indent, ensure_ascii=False, default=str)
