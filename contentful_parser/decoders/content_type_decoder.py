"""
Decoder for ContentType resources and their Field descriptors.

Field types are matched against FieldType; unknown type names decode to
FieldType.NONE instead of failing, so schema additions on the backend do
not break older clients.
"""

from typing import Any

from contentful_parser.decoders.base_decoder import BaseDecoder
from contentful_parser.domain.constants import SYS_ID, SYS_TYPE
from contentful_parser.domain.enums import FieldType, ResourceKind, ValueShape
from contentful_parser.domain.errors import DecodeError
from contentful_parser.domain.models import ContentType, Field
from contentful_parser.domain.value_extractor import extract

# Item type sources, highest priority first
_ITEM_TYPE_PATHS = ('items.type', 'items.linkType', 'linkType')
_LINK_TYPE_PATHS = ('items.linkType', 'linkType')


class FieldDecoder:
    """Decoder for a single content type field descriptor."""

    def decode(self, raw: Any) -> Field:
        """
        Decode a Field.

        Args:
            raw: Field JSON object (`id`, `name`, `type` required)

        Returns:
            Field with `item_type` taken from the first string among
            `items.type`, `items.linkType` and `linkType`
        """
        return Field(
            identifier=BaseDecoder._get_str(raw, 'id'),
            name=BaseDecoder._get_str(raw, 'name'),
            type=FieldType.from_raw(BaseDecoder._get_str(raw, 'type')),
            item_type=self._first_type(raw, _ITEM_TYPE_PATHS),
            link_type=self._first_type(raw, _LINK_TYPE_PATHS),
            disabled=BaseDecoder._get_flag(raw, 'disabled'),
            localized=BaseDecoder._get_flag(raw, 'localized'),
            required=BaseDecoder._get_flag(raw, 'required'),
        )

    @staticmethod
    def _first_type(raw: Any, paths: tuple[str, ...]) -> FieldType:
        for path in paths:
            value = BaseDecoder._get_optional_str(raw, path)
            if value is not None:
                return FieldType.from_raw(value)
        return FieldType.NONE


class ContentTypeDecoder(BaseDecoder):
    """Decoder for ContentType resources."""

    kind = ResourceKind.CONTENT_TYPE

    def __init__(self, options=None) -> None:
        super().__init__(options)
        self._field_decoder = FieldDecoder()

    def decode(self, raw: Any) -> ContentType:
        return ContentType(
            identifier=self._get_str(raw, SYS_ID),
            type=self._get_str(raw, SYS_TYPE),
            sys=self._get_sys(raw),
            name=self._get_str(raw, 'name'),
            fields=self._decode_fields(raw),
            description=self._get_optional_str(raw, 'description'),
            display_field=self._get_optional_str(raw, 'displayField'),
        )

    def _decode_fields(self, raw: Any) -> list[Field]:
        fields = []
        for idx, raw_field in enumerate(extract(raw, 'fields', ValueShape.ARRAY)):
            try:
                fields.append(self._field_decoder.decode(raw_field))
            except DecodeError as e:
                raise e.within('fields', idx)
        return fields
