"""Integration test for the full CLI pipeline."""

import json
import os

import pytest

from contentful_parser.cli import decode_file, main
from contentful_parser.domain.errors import DecodeError
from contentful_parser.domain.models import DecodeOptions


class TestCLIPipeline:
    """End-to-end tests for the decode pipeline."""

    def test_decode_produces_output_files(self, payload_file, collection_json, tmp_path):
        output_dir = str(tmp_path / "output")
        result = decode_file(payload_file(collection_json), output_dir, DecodeOptions())

        assert result.items_decoded == 2
        assert result.payload_type == 'Array'
        assert os.path.isfile(os.path.join(output_dir, 'decoded.json'))
        assert os.path.isfile(os.path.join(output_dir, 'summary.json'))

    def test_summary_structure(self, payload_file, collection_json, tmp_path):
        output_dir = str(tmp_path / "output")
        decode_file(payload_file(collection_json), output_dir, DecodeOptions())

        with open(os.path.join(output_dir, 'summary.json')) as f:
            summary = json.load(f)

        assert summary['_metadata']['source_payload'] == 'payload.json'
        assert summary['item_counts'] == {'Entry': 2}
        assert summary['locales'] == ['en-US']
        assert summary['pagination'] == {'limit': 100, 'skip': 0, 'total': 2}
        assert summary['include_counts'] == {'Asset': 1, 'Entry': 4}
        assert summary['links']['total'] == 6
        assert summary['links']['resolved'] == 4
        assert {u['target'] for u in summary['links']['unresolved']} == {'Entry_ghost'}

    def test_decoded_output_is_wire_shaped(self, payload_file, collection_json, tmp_path):
        output_dir = str(tmp_path / "output")
        decode_file(payload_file(collection_json), output_dir, DecodeOptions())

        with open(os.path.join(output_dir, 'decoded.json')) as f:
            decoded = json.load(f)
        assert [i['sys']['id'] for i in decoded['items']] == ['nyancat', 'garfield']
        assert decoded['items'][0]['fields']['bestFriend']['sys']['type'] == 'Link'

    def test_decode_without_output_dir(self, payload_file, asset_json):
        result = decode_file(payload_file(asset_json), None, DecodeOptions())
        assert result.payload_type == 'Asset'
        assert result.items_decoded == 1
        assert result.output_dir is None

    def test_result_counts_unresolved_links(self, payload_file, collection_json):
        result = decode_file(payload_file(collection_json), None, DecodeOptions())
        assert result.unresolved_links == 2

    def test_decode_error_propagates(self, payload_file, collection_json):
        del collection_json['total']
        with pytest.raises(DecodeError):
            decode_file(payload_file(collection_json), None, DecodeOptions())


class TestMain:
    """Tests for the argparse entry point."""

    def test_decode_command(self, payload_file, collection_json, tmp_path, capsys):
        output_dir = str(tmp_path / "out")
        main(['decode', payload_file(collection_json), '--output', output_dir, '--no-pretty'])
        out = capsys.readouterr().out
        assert 'Done! Decoded 2 Array item(s) (2 unresolved links)' in out
        assert f"Output: {output_dir}" in out

    def test_decode_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['decode', str(tmp_path / 'nope.json')])
        assert exc.value.code == 1
        assert 'not found' in capsys.readouterr().err

    def test_decode_invalid_payload_exits(self, payload_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['decode', payload_file({'sys': {'type': 'Hologram'}})])
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith('Error:')

    def test_scheme_option(self, payload_file, asset_json, tmp_path):
        output_dir = str(tmp_path / "out")
        main(['decode', payload_file(asset_json), '--output', output_dir, '--scheme', 'http'])
        with open(os.path.join(output_dir, 'decoded.json')) as f:
            assert json.load(f)['fields']['file']['url'].startswith('//')

    def test_kinds_command(self, capsys):
        main(['kinds'])
        out = capsys.readouterr().out
        for name in ('Asset', 'Entry', 'ContentType', 'Space', 'Locale'):
            assert name in out
