"""
Command Line Interface for thumbnail generation.
"""

import argparse
import logging
from typing import List, Optional

from . import __version__
from .collector import CollectionError
from .config import GeneratorConfig
from .generation_progress import GenerationProgress
from .generator import Generator
from .image_processor import ImageProcessor
from .reporter import Reporter
from .thumbnail_generator import ThumbnailGenerator


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('synothumb')


def get_config(args: argparse.Namespace) -> GeneratorConfig:
    """Get configuration from environment and CLI overrides."""
    config = GeneratorConfig.from_env()

    config.root_path = args.path
    config.force = args.force
    if args.workers is not None:
        config.workers = args.workers
    if args.quality is not None:
        config.quality = args.quality

    return config


def cmd_generate(args: argparse.Namespace) -> int:
    """Collect photos under the root and generate their thumbnails."""
    logger = setup_logging(args.verbose)

    try:
        config = get_config(args)
    except ValueError as e:
        logger.error(f"Invalid environment configuration: {e}")
        return 1

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    logger.info(f"Root: {config.root_path}")
    if config.force:
        logger.info("Force mode: existing thumbnails will be overwritten")

    processor = ImageProcessor(quality=config.quality, logger=logger)
    thumb_gen = ThumbnailGenerator(processor, logger=logger)
    generator = Generator(
        thumbnail_generator=thumb_gen,
        max_workers=config.workers,
        logger=logger
    )

    progress = None
    if not args.quiet:
        progress = GenerationProgress(show_files=args.show_files, logger=logger)

    try:
        stats = generator.run(config.root_path, force=config.force, progress=progress)
    except CollectionError as e:
        logger.error(f"Collection failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    if not args.quiet:
        print()
        Reporter().report_summary(stats)

    return 0 if stats.success else 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='synothumb',
        description='Generate Synology Photos thumbnails for a directory tree',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Thumbnails are written to <dir>/@eaDir/<photo>/SYNOPHOTO_THUMB_{SM,M,XL}.jpg.
Existing thumbnails are kept unless --force is given.

Environment:
  SYNOTHUMB_WORKERS   Default worker thread count
  SYNOTHUMB_QUALITY   Default JPEG quality (85)
"""
    )

    parser.add_argument('path', help='Path to generate thumbnails')
    parser.add_argument('-f', '--force', action='store_true',
                        help='Ignore existing thumbnails and overwrite')
    parser.add_argument('-j', '--workers', type=int, metavar='N',
                        help='Worker threads (default: SYNOTHUMB_WORKERS or executor default)')
    parser.add_argument('--quality', type=int, metavar='Q',
                        help='JPEG quality 1-95 (default: SYNOTHUMB_QUALITY or 85)')
    parser.add_argument('--show-files', action='store_true',
                        help='Print each file as processed with result')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return cmd_generate(parsed_args)
