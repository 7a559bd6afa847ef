"""Link analysis for decoded entries.

Lists every link edge found in entry fields, resolved or not, so callers
can see which references a payload failed to satisfy.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from contentful_parser.domain.enums import FieldValueKind
from contentful_parser.domain.models import Entry, Resource


@dataclass(frozen=True)
class LinkEdge:
    """A link from one entry field to another resource."""

    source_key: str
    target_key: str
    field_name: str
    locale: str
    is_resolved: bool


class LinkAnalyzer:
    """Extracts link edges from decoded entries.

    Resolved fields report their targets as resolved; stubs still present
    after resolution report as unresolved. Only the top level of each
    entry is walked; targets' own fields are not followed.
    """

    def analyze(self, resources: Iterable[Any]) -> list[LinkEdge]:
        """Analyze entries and collect their link edges.

        Args:
            resources: Decoded items; anything that is not an Entry is skipped.

        Returns:
            LinkEdge list in entry, locale, field order.
        """
        edges: list[LinkEdge] = []
        for entry in resources:
            if not isinstance(entry, Entry):
                continue
            for locale, fields in entry.localized_fields.items():
                for name, value in fields.items():
                    edges.extend(self._edges_for(entry, locale, name, value))
        return edges

    @staticmethod
    def unresolved(edges: list[LinkEdge]) -> list[LinkEdge]:
        return [e for e in edges if not e.is_resolved]

    @staticmethod
    def _edges_for(entry: Entry, locale: str, name: str, value: Any) -> list[LinkEdge]:
        if value.kind is FieldValueKind.RESOURCE:
            targets = [value.value]
        elif value.kind is FieldValueKind.RESOURCE_SEQUENCE:
            targets = value.value
        elif value.is_link:
            return [
                LinkEdge(entry.key, link.key, name, locale, False)
                for link in value.links
            ]
        else:
            return []
        return [
            LinkEdge(entry.key, target.key, name, locale, True)
            for target in targets
            if isinstance(target, Resource)
        ]
