"""Collection decoding: items → include index → link resolution.

Decodes a Contentful collection payload in five steps:

1. decode `items`, each by its resource kind
2. decode `includes` into an IncludeIndex (top-level resources added too)
3. Wave 1: resolve links inside the index
4. Wave 2: resolve links inside the items, against the Wave 1 index
5. read `limit`, `skip` and `total`

Single-resource payloads go through `decode_resource`; `decode_payload`
picks one or the other from `sys.type`.
"""

import logging
from typing import Any

from contentful_parser.decoder_registry import DecoderRegistry
from contentful_parser.domain.constants import PAGINATION_KEYS, SYS_TYPE
from contentful_parser.domain.enums import ResourceKind, ValueShape
from contentful_parser.domain.errors import DecodeError, UnknownResourceKind
from contentful_parser.domain.models import ContentfulArray, DecodeOptions, Resource
from contentful_parser.domain.value_extractor import extract, split_path
from contentful_parser.resolution.include_index import build_include_index
from contentful_parser.resolution.link_resolver import LinkResolver
from contentful_parser.type_detector import TypeDetector

logger = logging.getLogger(__name__)


def decode_resource(
    payload: Any,
    kind: ResourceKind | str | None = None,
    options: DecodeOptions | None = None,
    registry: DecoderRegistry | None = None,
) -> Any:
    """Decode a single resource payload.

    Args:
        payload: Resource JSON object.
        kind: Kind to decode as; detected from `sys.type` when omitted.
        options: Decode options (ignored when `registry` is given).
        registry: Decoder registry to use.

    Returns:
        Asset, Entry, ContentType, Space or Locale. Links in a single
        entry are left as stubs: there is no include index to resolve them.
    """
    registry = registry or DecoderRegistry(options)
    if kind is None:
        kind = _detect_kind(payload, registry)
    return registry.get_decoder(kind).decode(payload)


def decode_array(
    payload: Any,
    kind: ResourceKind | str | None = None,
    options: DecodeOptions | None = None,
) -> ContentfulArray:
    """Decode a collection payload and resolve its links.

    Args:
        payload: Collection JSON object (`items`, `limit`, `skip`, `total`,
            optional `includes`).
        kind: Kind of every item; detected per item when omitted.
        options: Decode options.

    Returns:
        ContentfulArray with resolved items and the final include index.

    Raises:
        DecodeError: An item or include fails to decode, or a pagination
            counter is missing.
    """
    options = options or DecodeOptions()
    registry = DecoderRegistry(options)

    items = []
    for idx, raw_item in enumerate(extract(payload, 'items', ValueShape.ARRAY)):
        try:
            items.append(decode_resource(raw_item, kind, registry=registry))
        except DecodeError as e:
            raise e.within('items', idx)

    index = build_include_index(payload, registry)
    if options.index_top_level_items:
        index = index.extended(item for item in items if isinstance(item, Resource))

    index = LinkResolver(index).resolve_index()
    resolver = LinkResolver(index)
    items = [resolver.resolve_item(item) for item in items]

    limit, skip, total = (extract(payload, key, ValueShape.INTEGER) for key in PAGINATION_KEYS)
    logger.debug("decoded %d items (%d indexed resources), total=%d", len(items), len(index), total)

    return ContentfulArray(items=items, limit=limit, skip=skip, total=total, includes=index)


def decode_payload(payload: Any, options: DecodeOptions | None = None) -> Any:
    """Decode any payload, dispatching on `sys.type` ('Array' → collection)."""
    if TypeDetector().detect(payload).is_collection:
        return decode_array(payload, options=options)
    return decode_resource(payload, options=options)


def _detect_kind(payload: Any, registry: DecoderRegistry) -> ResourceKind:
    detection = TypeDetector().detect(payload)
    if detection.kind is None:
        raise UnknownResourceKind(
            split_path(SYS_TYPE),
            ' | '.join(k.value for k in registry.get_supported_kinds()),
            detection.raw_type,
        )
    return detection.kind
