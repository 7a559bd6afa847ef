"""
Decoder for Asset resources.

Asset file URLs are delivered protocol-relative
('//images.ctfassets.net/...'); the decoder qualifies them with the
configured scheme so consumers always get an absolute URL. Plain 'http'
URLs are upgraded to the configured scheme; other explicit schemes are
kept as they are.
"""

from typing import Any
from urllib.parse import urlsplit

from contentful_parser.decoders.base_decoder import BaseDecoder
from contentful_parser.domain.constants import ASSET_URL, INSECURE_URL_SCHEME, SYS_ID, SYS_TYPE
from contentful_parser.domain.enums import ResourceKind, ValueShape
from contentful_parser.domain.errors import InvalidURL
from contentful_parser.domain.models import Asset
from contentful_parser.domain.value_extractor import extract, split_path


class AssetDecoder(BaseDecoder):
    """Decoder for Asset resources."""

    kind = ResourceKind.ASSET

    def decode(self, raw: Any) -> Asset:
        """
        Decode an Asset.

        Args:
            raw: Asset JSON object (`sys` + `fields`, `fields.file.url` required)

        Returns:
            Asset with `url` qualified (plain http upgraded), raw `sys` and `fields` retained

        Raises:
            MissingKey: `sys.id`, `sys.type` or `fields.file.url` absent
            InvalidURL: the qualified URL has no scheme or host
        """
        url = self._qualify_url(self._get_str(raw, ASSET_URL))
        return Asset(
            identifier=self._get_str(raw, SYS_ID),
            type=self._get_str(raw, SYS_TYPE),
            sys=self._get_sys(raw),
            url=url,
            fields=extract(raw, 'fields', ValueShape.OBJECT),
            title=self._get_optional_str(raw, 'fields.title'),
            content_type=self._get_optional_str(raw, 'fields.file.contentType'),
        )

    def _qualify_url(self, raw_url: str) -> str:
        try:
            scheme = urlsplit(raw_url).scheme
            if not scheme:
                url = f"{self.options.asset_url_scheme}:{raw_url}"
            elif scheme == INSECURE_URL_SCHEME:
                url = f"{self.options.asset_url_scheme}{raw_url[len(scheme):]}"
            else:
                url = raw_url
            parts = urlsplit(url)
        except ValueError:
            raise InvalidURL(split_path(ASSET_URL), raw_url)

        if not parts.scheme or not parts.netloc:
            raise InvalidURL(split_path(ASSET_URL), raw_url)
        return url
