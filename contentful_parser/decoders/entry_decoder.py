"""
Decoder for Entry resources.

Field values are partitioned by locale and classified into FieldValues
here; links stay as stubs until the collection decoder resolves them.
"""

from typing import Any

from contentful_parser.decoders.base_decoder import BaseDecoder
from contentful_parser.domain.constants import SYS_CONTENT_TYPE_ID, SYS_ID, SYS_LOCALE, SYS_TYPE
from contentful_parser.domain.enums import ResourceKind, ValueShape
from contentful_parser.domain.locale_normalizer import normalize_fields
from contentful_parser.domain.models import Entry
from contentful_parser.domain.value_extractor import extract


class EntryDecoder(BaseDecoder):
    """Decoder for Entry resources."""

    kind = ResourceKind.ENTRY

    def decode(self, raw: Any) -> Entry:
        """
        Decode an Entry.

        Args:
            raw: Entry JSON object. `sys.locale` is present only when the
                response was scoped to a single locale.

        Returns:
            Entry whose `locale` is `sys.locale`, or the default locale when
            the payload carried every locale
        """
        fields = extract(raw, 'fields', ValueShape.OBJECT)
        locale = self._get_optional_str(raw, SYS_LOCALE)

        return Entry(
            identifier=self._get_str(raw, SYS_ID),
            type=self._get_str(raw, SYS_TYPE),
            sys=self._get_sys(raw),
            localized_fields=normalize_fields(fields, locale, self.options.default_locale),
            locale=locale or self.options.default_locale,
            content_type_id=self._get_optional_str(raw, SYS_CONTENT_TYPE_ID),
        )
