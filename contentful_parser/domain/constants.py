"""Shared constants and wire paths.

Centralizes the payload key names used across decoding, resolution and
output modules.
"""

from contentful_parser.domain.enums import ResourceKind

# ── Locales ─────────────────────────────────────────────────────────────

# Sentinel locale for entries fetched with `locale=*`
DEFAULT_LOCALE = 'en-US'

# ── URLs ────────────────────────────────────────────────────────────────

DEFAULT_ASSET_URL_SCHEME = 'https'

# Explicit asset URL scheme rewritten to the configured one
INSECURE_URL_SCHEME = 'http'

# ── Payload Paths ───────────────────────────────────────────────────────

SYS_ID = 'sys.id'
SYS_TYPE = 'sys.type'
SYS_LOCALE = 'sys.locale'
SYS_CONTENT_TYPE_ID = 'sys.contentType.sys.id'
ASSET_URL = 'fields.file.url'

ARRAY_TYPE = 'Array'
LINK_TYPE = 'Link'

# ── Includes ────────────────────────────────────────────────────────────

# Kinds delivered under `includes`, in decode order
INCLUDABLE_KINDS: tuple[ResourceKind, ...] = (ResourceKind.ASSET, ResourceKind.ENTRY)

# Pagination counters read from every collection payload
PAGINATION_KEYS: tuple[str, ...] = ('limit', 'skip', 'total')
