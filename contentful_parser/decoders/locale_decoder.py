"""Decoder for Locale objects."""

from typing import Any

from contentful_parser.decoders.base_decoder import BaseDecoder
from contentful_parser.domain.enums import ResourceKind
from contentful_parser.domain.models import Locale


class LocaleDecoder(BaseDecoder):
    """Decoder for Locale objects (`code` and `name` required)."""

    kind = ResourceKind.LOCALE

    def decode(self, raw: Any) -> Locale:
        return Locale(
            code=self._get_str(raw, 'code'),
            name=self._get_str(raw, 'name'),
            is_default=self._get_flag(raw, 'default'),
            fallback_code=self._get_optional_str(raw, 'fallbackCode'),
        )
