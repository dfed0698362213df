"""Generate command implementation."""

import signal
import sys
from pathlib import Path

from ..core.config import GenerationOptions, parse_dimensions, parse_target_size
from ..core.errors import GenerationError
from ..core.generator import ImageGenerator
from ..core.providers import SeededProvider
from ..core.session import GenerationSession, RunState
from ..utils.formatter import (
    OutputFormatter,
    ProgressDisplay,
    format_duration,
    format_file_size,
    get_color_formatter,
)
from ..utils.hasher import ContentHasher
from ..utils.logger import get_logger


def build_options(args) -> GenerationOptions:
    """Translate parsed arguments into generation options."""
    options = GenerationOptions(
        count=args.count,
        format=args.format,
        include_metadata=not args.no_metadata,
        background=args.background,
        target_size=parse_target_size(args.target_size),
    )

    if args.size:
        options.random_size = False
        options.width, options.height = parse_dimensions(args.size)

    return options


def _summary_rows(session: GenerationSession):
    rows = []
    for item in session:
        rows.append({
            'name': item.name,
            'size': format_file_size(item.size),
            'metadata': (
                f"{item.metadata.make} {item.metadata.model}" if item.metadata else None
            ),
        })
    return rows


def execute(args) -> int:
    """Execute the generate command."""
    logger = get_logger()
    colors = get_color_formatter()

    try:
        options = build_options(args)
        options.validate()
    except GenerationError as e:
        logger.error(f"Invalid options: {e}")
        print(colors.error(f"Error: {e}"))
        return 1

    session = GenerationSession()
    generator = ImageGenerator(provider=SeededProvider(args.seed))

    display = None
    if sys.stderr.isatty():
        display = ProgressDisplay(options.count, "Generating")

    def progress_callback(current: int, total: int, step: int):
        if display:
            display.update(current)

    # First Ctrl-C stops after the current image, keeping what was generated
    def request_cancel(signum, frame):
        session.cancel()

    previous_handler = signal.signal(signal.SIGINT, request_cancel)
    try:
        report = generator.run(session, options, progress_callback)
    except GenerationError as e:
        logger.error(f"Generation failed: {e}")
        print(colors.error(f"Error: {e}"))
        return 1
    finally:
        signal.signal(signal.SIGINT, previous_handler)
        if display:
            display.finish()

    if report.rejected:
        print(colors.warning(f"Warning: {report.warning}"))
        return 1

    if report.state is RunState.CANCELLED:
        print(colors.warning(f"\nCancelled: kept {report.completed} of {report.requested} images"))

    if report.failed:
        print(colors.warning(f"{report.failed} images failed to generate (see log for details)"))

    if not len(session):
        print(colors.error("No images were generated"))
        return 1

    hasher = ContentHasher()

    try:
        if args.zip:
            archive_path = session.write_archive(args.zip)
            print(colors.success(f"Archive saved to: {archive_path}"))
            manifest_dir = archive_path.parent
        if args.output or not args.zip:
            output_dir = Path(args.output or 'placegen_output')
            written = session.write_files(output_dir)
            print(colors.success(f"Saved {len(written)} images to: {output_dir}"))
            manifest_dir = output_dir

        if args.manifest:
            manifest_path = hasher.save_manifest(session, manifest_dir / 'manifest.json')
            print(f"Manifest saved to: {manifest_path}")
    except OSError as e:
        logger.error(f"Failed to save results: {e}")
        print(colors.error(f"Error: failed to save results: {e}"))
        return 1

    formatter = OutputFormatter(args.summary_format)
    if args.summary_format in ('json', 'yaml'):
        formatter.print_data({
            'options': options.to_dict(),
            'report': report.to_dict(),
            'images': [item.to_dict() for item in session],
        })
    else:
        formatter.print_data(_summary_rows(session))
        print(
            f"\n{report.completed} images, {format_file_size(session.total_bytes())} "
            f"in {format_duration(report.elapsed)}"
        )

    logger.info(f"Generate completed: {report.completed}/{report.requested} images")
    return 130 if report.state is RunState.CANCELLED else 0
