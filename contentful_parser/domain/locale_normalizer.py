"""Locale partitioning of raw entry fields.

A single-locale response carries plain values:

    sys.locale = "de", fields = {"title": "Hallo"}
    → {"de": {"title": "Hallo"}}

A `locale=*` response nests every value under its locale code:

    fields = {"title": {"en-US": "Hi", "de": "Hallo"}}
    → {"en-US": {"title": "Hi"}, "de": {"title": "Hallo"}}
"""

from typing import Any

from contentful_parser.domain.constants import DEFAULT_LOCALE
from contentful_parser.domain.field_values import FieldValue


def normalize_fields(
    raw_fields: dict[str, Any],
    locale: str | None = None,
    default_locale: str = DEFAULT_LOCALE,
) -> dict[str, dict[str, FieldValue]]:
    """Partition raw entry fields into locale → field name → FieldValue.

    Args:
        raw_fields: The entry's `fields` object.
        locale: Explicit `sys.locale` of the response, if any.
        default_locale: Bucket created when nothing else was found.

    Returns:
        Mapping with at least one locale key.
    """
    if locale is not None:
        return {locale: {name: FieldValue.classify(value) for name, value in raw_fields.items()}}

    localized: dict[str, dict[str, FieldValue]] = {}
    for name, per_locale in raw_fields.items():
        # Non-object values cannot be attributed to a locale
        if not isinstance(per_locale, dict):
            continue
        for code, value in per_locale.items():
            localized.setdefault(code, {})[name] = FieldValue.classify(value)

    if not localized:
        localized[default_locale] = {}
    return localized
