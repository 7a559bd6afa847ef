"""Include index: composite key → Resource lookup for one payload.

The index is read-only once built. Link resolution never edits it in
place; it materializes a new index instead.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Iterator

from contentful_parser.decoder_registry import DecoderRegistry
from contentful_parser.domain.constants import INCLUDABLE_KINDS
from contentful_parser.domain.enums import ValueShape
from contentful_parser.domain.errors import DecodeError
from contentful_parser.domain.models import Entry, Resource
from contentful_parser.domain.value_extractor import extract_optional


class IncludeIndex(Mapping):
    """Insertion-ordered, read-only mapping of composite key to Resource.

    Args:
        resources: Resources to index. A later resource with the same
            composite key replaces the earlier one.
    """

    def __init__(self, resources: Iterable[Resource] = ()) -> None:
        self._resources: dict[str, Resource] = {}
        for resource in resources:
            self._resources[resource.key] = resource

    def __getitem__(self, key: str) -> Resource:
        return self._resources[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)

    def __repr__(self) -> str:
        return f"IncludeIndex({list(self._resources)})"

    def entries(self) -> list[Entry]:
        return [r for r in self._resources.values() if isinstance(r, Entry)]

    def extended(self, resources: Iterable[Resource]) -> 'IncludeIndex':
        """Return a new index with `resources` added (or replacing by key)."""
        return IncludeIndex([*self._resources.values(), *resources])

    def counts(self) -> dict[str, int]:
        """Number of indexed resources per kind."""
        by_kind: dict[str, int] = {}
        for resource in self._resources.values():
            by_kind[resource.kind.value] = by_kind.get(resource.kind.value, 0) + 1
        return dict(sorted(by_kind.items()))


def build_include_index(payload: Any, registry: DecoderRegistry | None = None) -> IncludeIndex:
    """Decode every Asset and Entry under `includes` into an index.

    Args:
        payload: Collection payload. A missing `includes` gives an empty index.
        registry: Decoder registry to use (defaults are built when omitted).

    Returns:
        The IncludeIndex, assets first, then entries.

    Raises:
        DecodeError: Any included resource fails to decode.
    """
    registry = registry or DecoderRegistry()
    includes = extract_optional(payload, 'includes', {}, ValueShape.OBJECT)

    resources: list[Resource] = []
    for kind in INCLUDABLE_KINDS:
        decoder = registry.get_decoder(kind)
        for idx, raw in enumerate(extract_optional(includes, kind.value, [], ValueShape.ARRAY)):
            try:
                resources.append(decoder.decode(raw))
            except DecodeError as e:
                raise e.within('includes', kind.value, idx)
    return IncludeIndex(resources)
