"""Shared test fixtures."""

import copy
import json

import pytest


# ── Sample Payloads ──────────────────────────────────────────────────────

def link(link_type: str, identifier: str) -> dict:
    return {'sys': {'type': 'Link', 'linkType': link_type, 'id': identifier}}


ASSET_JSON = {
    'sys': {'id': 'nyancat', 'type': 'Asset', 'revision': 3},
    'fields': {
        'title': 'Nyan Cat',
        'file': {
            'url': '//images.ctfassets.net/cfexampleapi/nyancat.png',
            'contentType': 'image/png',
            'fileName': 'Nyan_cat_250px_frame.png',
        },
    },
}

ENTRY_JSON = {
    'sys': {
        'id': 'nyancat',
        'type': 'Entry',
        'locale': 'en-US',
        'contentType': {'sys': {'type': 'Link', 'linkType': 'ContentType', 'id': 'cat'}},
    },
    'fields': {
        'name': 'Nyan Cat',
        'lives': 1337,
        'image': link('Asset', 'nyancat'),
        'bestFriend': link('Entry', 'happycat'),
    },
}

MULTI_LOCALE_ENTRY_JSON = {
    'sys': {'id': 'greeting', 'type': 'Entry'},
    'fields': {
        'title': {'en-US': 'Hi', 'de': 'Hallo'},
        'slug': {'en-US': 'hi'},
    },
}

CONTENT_TYPE_JSON = {
    'sys': {'id': 'cat', 'type': 'ContentType'},
    'name': 'Cat',
    'description': 'Meow.',
    'displayField': 'name',
    'fields': [
        {'id': 'name', 'name': 'Name', 'type': 'Text', 'required': True, 'localized': True},
        {'id': 'likes', 'name': 'Likes', 'type': 'Array', 'items': {'type': 'Symbol'}},
        {'id': 'bestFriend', 'name': 'Best Friend', 'type': 'Link', 'linkType': 'Entry'},
        {
            'id': 'friends', 'name': 'Friends', 'type': 'Array',
            'items': {'type': 'Link', 'linkType': 'Entry'},
        },
        {'id': 'mood', 'name': 'Mood', 'type': 'Hologram', 'disabled': True},
    ],
}

SPACE_JSON = {
    'sys': {'id': 'cfexampleapi', 'type': 'Space'},
    'name': 'Contentful Example API',
    'locales': [
        {'code': 'en-US', 'default': True, 'name': 'English'},
        {'code': 'tlh', 'default': False, 'name': 'Klingon', 'fallbackCode': 'en-US'},
    ],
}


def _entry(identifier: str, fields: dict, locale: str = 'en-US') -> dict:
    return {'sys': {'id': identifier, 'type': 'Entry', 'locale': locale}, 'fields': fields}


COLLECTION_JSON = {
    'sys': {'type': 'Array'},
    'total': 2,
    'skip': 0,
    'limit': 100,
    'items': [
        _entry('nyancat', {
            'name': 'Nyan Cat',
            'image': link('Asset', 'nyancat'),
            'bestFriend': link('Entry', 'happycat'),
            'friends': [link('Entry', 'happycat'), link('Entry', 'ghost')],
            'enemies': [link('Entry', 'ghost')],
            'likes': ['rainbows', 'fish'],
        }),
        _entry('garfield', {
            'name': 'Garfield',
            'bestFriend': link('Entry', 'nyancat'),
            'rival': link('Entry', 'ghost'),
        }),
    ],
    'includes': {
        'Asset': [ASSET_JSON],
        'Entry': [
            _entry('happycat', {
                'name': 'Happy Cat',
                'bestFriend': link('Entry', 'grumpycat'),
                'image': link('Asset', 'nyancat'),
            }),
            _entry('grumpycat', {
                'name': 'Grumpy Cat',
                'bestFriend': link('Entry', 'happycat'),
            }),
        ],
    },
}


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def asset_json():
    return copy.deepcopy(ASSET_JSON)


@pytest.fixture
def entry_json():
    return copy.deepcopy(ENTRY_JSON)


@pytest.fixture
def multi_locale_entry_json():
    return copy.deepcopy(MULTI_LOCALE_ENTRY_JSON)


@pytest.fixture
def content_type_json():
    return copy.deepcopy(CONTENT_TYPE_JSON)


@pytest.fixture
def space_json():
    return copy.deepcopy(SPACE_JSON)


@pytest.fixture
def collection_json():
    return copy.deepcopy(COLLECTION_JSON)


@pytest.fixture
def payload_file(tmp_path):
    """Write a payload to a temp file and return its path."""
    def _write(payload, filename: str = "payload.json") -> str:
        path = tmp_path / filename
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
