"""Decoder registry for Contentful resource kinds."""

from contentful_parser.decoders.base_decoder import BaseDecoder
from contentful_parser.domain.constants import SYS_TYPE
from contentful_parser.domain.enums import ResourceKind
from contentful_parser.domain.errors import UnknownResourceKind
from contentful_parser.domain.models import DecodeOptions
from contentful_parser.domain.value_extractor import split_path


class DecoderRegistry:
    """Registry mapping resource kinds to decoder instances."""

    def __init__(self, options: DecodeOptions | None = None):
        self.options = options or DecodeOptions()
        self._decoders: dict[ResourceKind, BaseDecoder] = {}
        self._register_default_decoders()

    def _register_default_decoders(self) -> None:
        from contentful_parser.decoders.asset_decoder import AssetDecoder
        from contentful_parser.decoders.entry_decoder import EntryDecoder
        from contentful_parser.decoders.content_type_decoder import ContentTypeDecoder
        from contentful_parser.decoders.space_decoder import SpaceDecoder
        from contentful_parser.decoders.locale_decoder import LocaleDecoder

        for decoder_cls in (AssetDecoder, EntryDecoder, ContentTypeDecoder, SpaceDecoder, LocaleDecoder):
            decoder = decoder_cls(self.options)
            self.register_decoder(decoder.kind, decoder)

    def get_decoder(self, kind: ResourceKind | str) -> BaseDecoder:
        try:
            return self._decoders[ResourceKind(kind)]
        except (KeyError, ValueError):
            raise UnknownResourceKind(split_path(SYS_TYPE), self._expected(), kind) from None

    def register_decoder(self, kind: ResourceKind, decoder: BaseDecoder) -> None:
        self._decoders[kind] = decoder

    def get_supported_kinds(self) -> list[ResourceKind]:
        return list(self._decoders.keys())

    def _expected(self) -> str:
        return ' | '.join(k.value for k in self._decoders)
