"""Tests for locale partitioning and field value classification."""

import pytest

from contentful_parser.domain.enums import FieldValueKind
from contentful_parser.domain.field_values import FieldValue, Link, composite_key
from contentful_parser.domain.locale_normalizer import normalize_fields
from tests.conftest import link


class TestNormalizeFields:
    """Tests for normalize_fields."""

    def test_multi_locale_is_inverted(self):
        result = normalize_fields({'title': {'en-US': 'Hi', 'de': 'Hallo'}})
        assert result['en-US']['title'].value == 'Hi'
        assert result['de']['title'].value == 'Hallo'

    def test_multi_locale_partial_fields(self):
        result = normalize_fields({
            'title': {'en-US': 'Hi', 'de': 'Hallo'},
            'slug': {'en-US': 'hi'},
        })
        assert set(result['en-US']) == {'title', 'slug'}
        assert set(result['de']) == {'title'}

    def test_explicit_locale_copies_values(self):
        result = normalize_fields({'title': 'Hallo'}, locale='de')
        assert list(result) == ['de']
        assert result['de']['title'].value == 'Hallo'

    def test_explicit_locale_keeps_nested_objects(self):
        result = normalize_fields({'location': {'lat': 1.0, 'lon': 2.0}}, locale='de')
        assert result['de']['location'].kind is FieldValueKind.OBJECT
        assert result['de']['location'].value == {'lat': 1.0, 'lon': 2.0}

    def test_non_object_values_skipped_without_locale(self):
        result = normalize_fields({'title': 'Hi', 'slug': {'en-US': 'hi'}})
        assert result == {'en-US': {'slug': FieldValue.classify('hi')}}

    def test_empty_fields_get_default_bucket(self):
        assert normalize_fields({}) == {'en-US': {}}
        assert normalize_fields({}, default_locale='de') == {'de': {}}

    def test_empty_fields_with_explicit_locale(self):
        assert normalize_fields({}, locale='fr') == {'fr': {}}

    def test_raw_fields_not_mutated(self):
        raw = {'title': {'en-US': 'Hi'}}
        normalize_fields(raw)
        assert raw == {'title': {'en-US': 'Hi'}}


class TestFieldValueClassify:
    """Tests for FieldValue.classify."""

    def test_scalars(self):
        for raw in ('text', 42, 1.5, True, None):
            assert FieldValue.classify(raw).kind is FieldValueKind.SCALAR

    def test_link_stub(self):
        value = FieldValue.classify(link('Entry', 'A1'))
        assert value.kind is FieldValueKind.LINK
        assert value.links[0].key == 'Entry_A1'
        assert value.is_link

    def test_link_collection(self):
        value = FieldValue.classify([link('Entry', 'a'), link('Asset', 'b')])
        assert value.kind is FieldValueKind.LINK_COLLECTION
        assert [l.key for l in value.links] == ['Entry_a', 'Asset_b']

    def test_mixed_array_is_plain_array(self):
        value = FieldValue.classify([link('Entry', 'a'), 'text'])
        assert value.kind is FieldValueKind.ARRAY
        assert value.links == ()

    def test_malformed_stub_kept_out_of_collection_links(self):
        broken = {'sys': {'type': 'Link', 'id': 'broken'}}
        value = FieldValue.classify([link('Entry', 'a'), broken])
        assert value.kind is FieldValueKind.LINK_COLLECTION
        assert [l.key for l in value.links] == ['Entry_a']
        assert value.value == [link('Entry', 'a'), broken]

    def test_objects_without_stubs_are_plain_array(self):
        value = FieldValue.classify([{'lat': 1.0}, {'sys': {'id': 'x'}}])
        assert value.kind is FieldValueKind.ARRAY
        assert value.links == ()

    def test_empty_array_is_plain_array(self):
        assert FieldValue.classify([]).kind is FieldValueKind.ARRAY

    def test_object_without_link_shape(self):
        assert FieldValue.classify({'sys': {'id': 'x'}}).kind is FieldValueKind.OBJECT
        assert FieldValue.classify({'sys': 'x'}).kind is FieldValueKind.OBJECT


class TestLink:

    def test_parse_requires_id_and_link_type(self):
        assert Link.parse({'sys': {'id': 'x', 'linkType': 'Entry'}}) is not None
        assert Link.parse({'sys': {'id': 1, 'linkType': 'Entry'}}) is None
        assert Link.parse('Entry_x') is None

    def test_composite_key(self):
        assert composite_key('Asset', 'x') == 'Asset_x'
