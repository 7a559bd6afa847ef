"""Link resolver for entry field values.

Replaces link stubs in entry fields with the resources they point to:

    LINK             → RESOURCE when the target is indexed, else unchanged
    LINK_COLLECTION  → RESOURCE_SEQUENCE of the targets that are indexed;
                       unchanged when none of them is

Resolution of a whole collection runs in two waves. Wave 1
(`resolve_index`) resolves the entries of the include index against an
immutable snapshot of that index; Wave 2 resolves the top-level items
against the index produced by Wave 1. Wave 1 is a single pass: an entry
that links to another entry receives the target as it was in the
snapshot, with its own links still unresolved.
"""

import logging
from typing import Any

from contentful_parser.domain.enums import FieldValueKind
from contentful_parser.domain.field_values import FieldValue
from contentful_parser.domain.models import Entry
from contentful_parser.resolution.include_index import IncludeIndex

logger = logging.getLogger(__name__)


class LinkResolver:
    """Resolves link stubs in entries against an include index.

    Args:
        index: Composite key → Resource lookup. Never modified.
    """

    def __init__(self, index: IncludeIndex) -> None:
        self._index = index

    @property
    def index(self) -> IncludeIndex:
        return self._index

    def resolve_index(self) -> IncludeIndex:
        """Wave 1: resolve every indexed entry against the current index.

        Returns:
            A new IncludeIndex, same keys and order, entries resolved.
        """
        return IncludeIndex(self.resolve_item(resource) for resource in self._index.values())

    def resolve_item(self, item: Any) -> Any:
        """Resolve an entry; any other item is returned unchanged."""
        if isinstance(item, Entry):
            return self.resolve_entry(item)
        return item

    def resolve_entry(self, entry: Entry) -> Entry:
        """Return a copy of entry with every locale's links resolved."""
        localized_fields = {
            locale: {
                name: self._resolve_field(entry, locale, name, value)
                for name, value in fields.items()
            }
            for locale, fields in entry.localized_fields.items()
        }
        return entry.with_localized_fields(localized_fields)

    def resolve_value(self, value: FieldValue) -> FieldValue:
        """Resolve a single field value.

        Args:
            value: Field value of any kind.

        Returns:
            RESOURCE / RESOURCE_SEQUENCE on success, otherwise `value` itself.
        """
        if value.kind is FieldValueKind.LINK:
            target = self._index.get(value.links[0].key)
            if target is None:
                return value
            return FieldValue(FieldValueKind.RESOURCE, target)

        if value.kind is FieldValueKind.LINK_COLLECTION:
            # Unresolvable links are dropped from the sequence
            targets = [self._index[link.key] for link in value.links if link.key in self._index]
            if not targets:
                return value
            return FieldValue(FieldValueKind.RESOURCE_SEQUENCE, targets)

        return value

    def _resolve_field(self, entry: Entry, locale: str, name: str, value: FieldValue) -> FieldValue:
        resolved = self.resolve_value(value)
        if value.is_link and logger.isEnabledFor(logging.DEBUG):
            missing = [link.key for link in value.links if link.key not in self._index]
            if missing:
                logger.debug(
                    "unresolved links in %s field %s[%s]: %s",
                    entry.key, name, locale, ', '.join(missing),
                )
        return resolved
