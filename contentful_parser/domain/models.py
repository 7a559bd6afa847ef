"""Shared data models used across decoder modules."""

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Iterator

from contentful_parser.domain.constants import DEFAULT_ASSET_URL_SCHEME, DEFAULT_LOCALE
from contentful_parser.domain.enums import FieldType, ResourceKind
from contentful_parser.domain.field_values import FieldValue, composite_key


@dataclass(frozen=True)
class Resource:
    """Common part of every addressable resource.

    Only `sys.id` and `sys.type` are promoted to attributes; the whole
    `sys` object is kept for revision, timestamps and the like.
    """

    kind: ClassVar[ResourceKind]

    identifier: str
    type: str
    sys: dict[str, Any]

    @property
    def key(self) -> str:
        return composite_key(self.kind, self.identifier)


@dataclass(frozen=True)
class Asset(Resource):
    """A binary asset with its scheme-qualified URL."""

    kind: ClassVar[ResourceKind] = ResourceKind.ASSET

    url: str
    fields: dict[str, Any]
    title: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class Entry(Resource):
    """A content entry with fields partitioned by locale."""

    kind: ClassVar[ResourceKind] = ResourceKind.ENTRY

    localized_fields: dict[str, dict[str, FieldValue]]
    locale: str = DEFAULT_LOCALE
    content_type_id: str | None = None

    @property
    def locales(self) -> list[str]:
        return list(self.localized_fields)

    @property
    def fields(self) -> dict[str, Any]:
        """Plain field values for the entry's own locale."""
        return {
            name: value.value
            for name, value in self.localized_fields.get(self.locale, {}).items()
        }

    def get(self, name: str, locale: str | None = None, default: Any = None) -> Any:
        """Plain value of one field, for `locale` or the entry's own locale."""
        bucket = self.localized_fields.get(locale or self.locale, {})
        value = bucket.get(name)
        return default if value is None else value.value

    def with_localized_fields(self, localized_fields: dict[str, dict[str, FieldValue]]) -> 'Entry':
        return replace(self, localized_fields=localized_fields)


@dataclass(frozen=True)
class Field:
    """A content type field descriptor (schema only, never resolved)."""

    identifier: str
    name: str
    type: FieldType
    item_type: FieldType = FieldType.NONE
    link_type: FieldType = FieldType.NONE
    disabled: bool = False
    localized: bool = False
    required: bool = False


@dataclass(frozen=True)
class ContentType(Resource):
    """A content type and its field schema."""

    kind: ClassVar[ResourceKind] = ResourceKind.CONTENT_TYPE

    name: str
    fields: list[Field]
    description: str | None = None
    display_field: str | None = None


@dataclass(frozen=True)
class Locale:
    """A locale enabled in a space."""

    code: str
    name: str
    is_default: bool = False
    fallback_code: str | None = None


@dataclass(frozen=True)
class Space(Resource):
    """A space and its locales."""

    kind: ClassVar[ResourceKind] = ResourceKind.SPACE

    name: str
    locales: list[Locale]


@dataclass(frozen=True)
class ContentfulArray:
    """A page of decoded items plus the pagination counters of the response.

    `limit`, `skip` and `total` are copied verbatim; they are not checked
    against `len(items)`.
    """

    items: list[Any]
    limit: int
    skip: int
    total: int
    includes: Any = None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class DecodeOptions:
    """Options controlling how payloads are decoded."""

    default_locale: str = DEFAULT_LOCALE
    asset_url_scheme: str = DEFAULT_ASSET_URL_SCHEME
    index_top_level_items: bool = True


@dataclass
class DecodeResult:
    """Result summary of a decode run."""

    source: str
    payload_type: str
    items_decoded: int
    unresolved_links: int
    output_dir: str | None = None
