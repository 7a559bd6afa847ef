"""Tagged entry field values.

Raw field values are classified once, when an entry's fields are
normalized, so resolution only switches on `FieldValue.kind`:

    {"sys": {"id": "A1", "linkType": "Entry"}}   → LINK
    [<link stub>, <link stub>]                    → LINK_COLLECTION
    [<link stub>, {"sys": {"id": "B"}}]           → LINK_COLLECTION
    {"lat": 1.0, "lon": 2.0}                      → OBJECT
    ["a", "b"], [], [<stub>, "x"]                 → ARRAY
    "Hello", 42, True, None                       → SCALAR

RESOURCE and RESOURCE_SEQUENCE only come out of link resolution.
"""

from dataclasses import dataclass
from typing import Any

from contentful_parser.domain.enums import FieldValueKind


def composite_key(kind: Any, identifier: str) -> str:
    """Build the '<Kind>_<id>' key used to address resources in an index."""
    return f"{getattr(kind, 'value', kind)}_{identifier}"


@dataclass(frozen=True)
class Link:
    """A parsed link stub: a reference to another resource."""

    link_type: str
    identifier: str
    raw: dict

    @property
    def key(self) -> str:
        return composite_key(self.link_type, self.identifier)

    @classmethod
    def parse(cls, raw: Any) -> 'Link | None':
        """Return a Link when raw has the `{sys: {id, linkType}}` shape."""
        if not isinstance(raw, dict):
            return None
        sys = raw.get('sys')
        if not isinstance(sys, dict):
            return None
        identifier = sys.get('id')
        link_type = sys.get('linkType')
        if isinstance(identifier, str) and isinstance(link_type, str):
            return cls(link_type=link_type, identifier=identifier, raw=raw)
        return None


@dataclass(frozen=True)
class FieldValue:
    """A single entry field value with its kind decided up front.

    Attributes:
        kind: Tag selecting how `value` is to be read.
        value: The raw JSON value, a resolved Resource, or a list of Resources.
        links: Parsed stubs for LINK / LINK_COLLECTION values, empty otherwise.
    """

    kind: FieldValueKind
    value: Any
    links: tuple[Link, ...] = ()

    @classmethod
    def classify(cls, raw: Any) -> 'FieldValue':
        if isinstance(raw, dict):
            link = Link.parse(raw)
            if link is not None:
                return cls(FieldValueKind.LINK, raw, (link,))
            return cls(FieldValueKind.OBJECT, raw)
        if isinstance(raw, list):
            # Malformed stubs are dropped; the other stubs still resolve
            if raw and all(isinstance(item, dict) for item in raw):
                links = tuple(link for link in map(Link.parse, raw) if link is not None)
                if links:
                    return cls(FieldValueKind.LINK_COLLECTION, raw, links)
            return cls(FieldValueKind.ARRAY, raw)
        return cls(FieldValueKind.SCALAR, raw)

    @property
    def is_link(self) -> bool:
        return self.kind in (FieldValueKind.LINK, FieldValueKind.LINK_COLLECTION)

    @property
    def is_resolved(self) -> bool:
        return self.kind in (FieldValueKind.RESOURCE, FieldValueKind.RESOURCE_SEQUENCE)
