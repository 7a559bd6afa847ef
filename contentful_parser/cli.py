"""CLI for contentful-parser."""

import argparse
import logging
import os
import sys

from contentful_parser.collection_decoder import decode_payload
from contentful_parser.decoder_registry import DecoderRegistry
from contentful_parser.dependencies.link_analyzer import LinkAnalyzer
from contentful_parser.domain.errors import DecodeError
from contentful_parser.domain.models import ContentfulArray, DecodeOptions, DecodeResult
from contentful_parser.output.json_dumper import JSONDumper
from contentful_parser.output.summary_builder import SummaryBuilder
from contentful_parser.payload_reader import PayloadReader, PayloadReadError


def decode_file(
    payload_path: str,
    output_dir: str | None,
    options: DecodeOptions,
    pretty: bool = True,
) -> DecodeResult:
    """Main orchestration: payload file -> decoded graph -> JSON output."""
    payload = PayloadReader().read(payload_path)
    decoded = decode_payload(payload, options)

    items = list(decoded) if isinstance(decoded, ContentfulArray) else [decoded]
    unresolved = LinkAnalyzer.unresolved(LinkAnalyzer().analyze(items))

    if output_dir:
        JSONDumper(pretty=pretty).write(decoded, os.path.join(output_dir, 'decoded.json'))
        builder = SummaryBuilder()
        summary = builder.build(decoded, source=os.path.basename(payload_path))
        builder.write(summary, output_dir, pretty=pretty)

    return DecodeResult(
        source=os.path.basename(payload_path),
        payload_type='Array' if isinstance(decoded, ContentfulArray) else decoded.__class__.__name__,
        items_decoded=len(items),
        unresolved_links=len(unresolved),
        output_dir=output_dir,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog='contentful-parser', description='Contentful payload decoder')
    subparsers = parser.add_subparsers(dest='command')

    # decode command
    decode_parser = subparsers.add_parser('decode', help='Decode a payload and resolve its links')
    decode_parser.add_argument('payload', help='Path to a Contentful JSON response')
    decode_parser.add_argument('--output', help='Directory for decoded.json and summary.json')
    decode_parser.add_argument('--default-locale', default='en-US',
                               help='Locale used when the payload carries all locales (default: en-US)')
    decode_parser.add_argument('--scheme', default='https', help='Scheme for asset URLs (default: https)')
    decode_parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')
    decode_parser.add_argument('--no-index-items', action='store_true',
                               help='Do not let items resolve links to other items')
    decode_parser.add_argument('-v', '--verbose', action='store_true', help='Log unresolved links')

    # kinds command
    subparsers.add_parser('kinds', help='List supported resource kinds')

    args = parser.parse_args(argv)

    if args.command == 'decode':
        _configure_logging(args.verbose)
        if not os.path.isfile(args.payload):
            print(f"Error: {args.payload} not found", file=sys.stderr)
            sys.exit(1)

        options = DecodeOptions(
            default_locale=args.default_locale,
            asset_url_scheme=args.scheme,
            index_top_level_items=not args.no_index_items,
        )

        print(f"Decoding {args.payload}...")
        try:
            result = decode_file(args.payload, args.output, options, pretty=not args.no_pretty)
        except (PayloadReadError, DecodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Done! Decoded {result.items_decoded} {result.payload_type} item(s) "
              f"({result.unresolved_links} unresolved links)")
        if result.output_dir:
            print(f"Output: {result.output_dir}")

    elif args.command == 'kinds':
        registry = DecoderRegistry()
        for kind in registry.get_supported_kinds():
            print(f"  {kind.value}")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
