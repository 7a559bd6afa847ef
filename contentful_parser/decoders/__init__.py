"""Contentful resource decoders."""

from contentful_parser.decoders.base_decoder import BaseDecoder
from contentful_parser.decoders.asset_decoder import AssetDecoder
from contentful_parser.decoders.entry_decoder import EntryDecoder
from contentful_parser.decoders.content_type_decoder import ContentTypeDecoder, FieldDecoder
from contentful_parser.decoders.locale_decoder import LocaleDecoder
from contentful_parser.decoders.space_decoder import SpaceDecoder

__all__ = [
    'BaseDecoder', 'AssetDecoder', 'EntryDecoder',
    'ContentTypeDecoder', 'FieldDecoder',
    'LocaleDecoder', 'SpaceDecoder',
]
