#!/usr/bin/env python3
"""Main entry point for placegen."""

import argparse
import sys

from placegen import __version__
from placegen.commands import generate, presets
from placegen.core.config import TARGET_SIZE_CHOICES
from placegen.utils.formatter import get_color_formatter
from placegen.utils.logger import setup_logger


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog='placegen',
        description='Generate placeholder images with optional fabricated EXIF metadata',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Log file path (default: placegen.log)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Generate command
    generate_parser = subparsers.add_parser(
        'generate',
        help='Generate a batch of placeholder images'
    )
    generate_parser.add_argument(
        '--count', '-n',
        type=int,
        default=1,
        help='Number of images to generate (default: 1)'
    )
    size_group = generate_parser.add_mutually_exclusive_group()
    size_group.add_argument(
        '--size', '-s',
        type=str,
        help='Fixed size as WIDTHxHEIGHT (e.g. 800x600)'
    )
    size_group.add_argument(
        '--random-size',
        action='store_true',
        help='Pick sizes from the landscape/portrait presets (default)'
    )
    generate_parser.add_argument(
        '--format', '-f',
        choices=['jpeg', 'jpg', 'png'],
        default='jpeg',
        help='Output format (default: jpeg)'
    )
    generate_parser.add_argument(
        '--no-metadata',
        action='store_true',
        help='Do not embed fabricated EXIF metadata (JPEG only)'
    )
    generate_parser.add_argument(
        '--background', '-b',
        type=str,
        help='Background colour, e.g. "#336699" or "teal" (default: random hue)'
    )
    generate_parser.add_argument(
        '--target-size', '-t',
        type=str,
        default='auto',
        help=f"Pad each file to this size: {', '.join(TARGET_SIZE_CHOICES)} or a byte count"
    )
    generate_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Directory for the individual images (default: placegen_output unless --zip is given)'
    )
    generate_parser.add_argument(
        '--zip', '-z',
        type=str,
        help='Write all images into this ZIP archive'
    )
    generate_parser.add_argument(
        '--manifest',
        action='store_true',
        help='Write manifest.json with sizes and SHA-256 digests'
    )
    generate_parser.add_argument(
        '--summary-format',
        choices=['table', 'json', 'yaml', 'plain'],
        default='table',
        help='Summary output format (default: table)'
    )
    generate_parser.add_argument(
        '--seed',
        type=int,
        help='Seed for reproducible output'
    )

    # Presets command
    presets_parser = subparsers.add_parser(
        'presets',
        help='List random size presets and target size choices'
    )
    presets_parser.add_argument(
        '--format',
        choices=['table', 'json', 'yaml', 'plain'],
        default='table',
        help='Output format (default: table)'
    )

    return parser


def main(argv=None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_file = args.log_file or 'placegen.log'
    logger = setup_logger(verbose=args.verbose, log_file=log_file)

    color_formatter = get_color_formatter()

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'generate':
            return generate.execute(args)
        elif args.command == 'presets':
            return presets.execute(args)
        else:
            logger.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        print(color_formatter.warning("\nOperation cancelled by user"))
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        print(color_formatter.error(f"Error: {e}"))
        if args.verbose:
            logger.exception("Full traceback:")
        return 1


if __name__ == '__main__':
    sys.exit(main())
