"""Decoder for Space resources."""

from typing import Any

from contentful_parser.decoders.base_decoder import BaseDecoder
from contentful_parser.decoders.locale_decoder import LocaleDecoder
from contentful_parser.domain.constants import SYS_ID, SYS_TYPE
from contentful_parser.domain.enums import ResourceKind, ValueShape
from contentful_parser.domain.errors import DecodeError
from contentful_parser.domain.models import Locale, Space
from contentful_parser.domain.value_extractor import extract


class SpaceDecoder(BaseDecoder):
    """Decoder for Space resources, including their locale list."""

    kind = ResourceKind.SPACE

    def __init__(self, options=None) -> None:
        super().__init__(options)
        self._locale_decoder = LocaleDecoder(options)

    def decode(self, raw: Any) -> Space:
        return Space(
            identifier=self._get_str(raw, SYS_ID),
            type=self._get_str(raw, SYS_TYPE),
            sys=self._get_sys(raw),
            name=self._get_str(raw, 'name'),
            locales=self._decode_locales(raw),
        )

    def _decode_locales(self, raw: Any) -> list[Locale]:
        locales = []
        for idx, raw_locale in enumerate(extract(raw, 'locales', ValueShape.ARRAY)):
            try:
                locales.append(self._locale_decoder.decode(raw_locale))
            except DecodeError as e:
                raise e.within('locales', idx)
        return locales
