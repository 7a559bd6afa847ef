"""Builds the summary.json report for a decoded payload."""

import json
import os
from datetime import datetime, timezone
from typing import Any

from contentful_parser.dependencies.link_analyzer import LinkAnalyzer
from contentful_parser.domain.models import ContentfulArray, Entry


class SummaryBuilder:
    """Builds a short report of what a payload decoded to."""

    def build(self, decoded: Any, source: str = '') -> dict[str, Any]:
        items = list(decoded) if isinstance(decoded, ContentfulArray) else [decoded]

        item_counts: dict[str, int] = {}
        locales: set[str] = set()
        for item in items:
            kind = getattr(item, 'kind', None)
            name = kind.value if kind else type(item).__name__
            item_counts[name] = item_counts.get(name, 0) + 1
            if isinstance(item, Entry):
                locales.update(item.locales)

        analyzer = LinkAnalyzer()
        edges = analyzer.analyze(items)
        unresolved = analyzer.unresolved(edges)

        summary: dict[str, Any] = {
            '_metadata': {
                'generated_at': datetime.now(timezone.utc).isoformat(),
                'source_payload': source,
            },
            'item_counts': dict(sorted(item_counts.items())),
            'locales': sorted(locales),
            'links': {
                'total': len(edges),
                'resolved': len(edges) - len(unresolved),
                'unresolved': [
                    {'source': e.source_key, 'target': e.target_key, 'field': e.field_name, 'locale': e.locale}
                    for e in unresolved
                ],
            },
        }
        if isinstance(decoded, ContentfulArray):
            summary['pagination'] = {'limit': decoded.limit, 'skip': decoded.skip, 'total': decoded.total}
            summary['include_counts'] = decoded.includes.counts() if decoded.includes is not None else {}
        return summary

    @staticmethod
    def write(summary: dict, output_dir: str, pretty: bool = True) -> None:
        os.makedirs(output_dir, exist_ok=True)
        path = os.path.join(output_dir, 'summary.json')
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2 if pretty else None, ensure_ascii=False, default=str)
