# src/main.py — v2
"""CLI entry point: analyze, summary, extract, batch, info commands.

Usage:
    docinsight analyze <file> [--json]
    docinsight summary <file>
    docinsight extract <file>
    docinsight batch <directory> [--recursive] [--concurrency N]
    docinsight info <file>
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from docinsight.config.settings import ConfigurationError, Settings
from docinsight.core.errors import DocumentError
from docinsight.logging.logger import configure_from_settings
from docinsight.version import __version__

logger = logging.getLogger(__name__)

# Commands that never reach the completion endpoint
_OFFLINE_COMMANDS = {"extract", "info"}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = Settings()
        configure_from_settings(settings, args.verbose)
        if args.command not in _OFFLINE_COMMANDS:
            settings.require_api_key()
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (DocumentError, ConfigurationError) as exc:
        logger.error("%s", exc)
        return 1
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def cli() -> None:
    """Console-script wrapper."""
    sys.exit(main())


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="docinsight",
        description=f"docinsight v{__version__} - document text and insight extraction",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- analyze ---
    p_analyze = subparsers.add_parser(
        "analyze", help="Extract insights from a document",
    )
    p_analyze.add_argument("file", type=Path, help="Path to document")
    p_analyze.add_argument(
        "--json", action="store_true",
        help="Print one JSON record per insight instead of a table",
    )
    p_analyze.set_defaults(func=_cmd_analyze)

    # --- summary ---
    p_summary = subparsers.add_parser(
        "summary", help="Print a free-form analysis of a document",
    )
    p_summary.add_argument("file", type=Path, help="Path to document")
    p_summary.set_defaults(func=_cmd_summary)

    # --- extract ---
    p_extract = subparsers.add_parser(
        "extract", help="Print the raw extracted text of a document",
    )
    p_extract.add_argument("file", type=Path, help="Path to document")
    p_extract.set_defaults(func=_cmd_extract)

    # --- batch ---
    p_batch = subparsers.add_parser(
        "batch", help="Extract insights from every file in a directory",
    )
    p_batch.add_argument("directory", type=Path, help="Directory to process")
    p_batch.add_argument(
        "--recursive", action="store_true",
        help="Descend into subdirectories",
    )
    p_batch.add_argument(
        "--concurrency", type=int, default=None,
        help="Documents processed in parallel (default: BATCH_MAX_CONCURRENCY)",
    )
    p_batch.set_defaults(func=_cmd_batch)

    # --- info ---
    p_info = subparsers.add_parser(
        "info", help="Show file metadata and whether it can be processed",
    )
    p_info.add_argument("file", type=Path, help="Path to document")
    p_info.set_defaults(func=_cmd_info)

    return parser


def _build_processor(settings: Settings):
    from docinsight.pipeline.document_processor import DocumentProcessor

    return DocumentProcessor(settings)


async def _cmd_analyze(args: argparse.Namespace, settings: Settings) -> int:
    """Extract and print insights for one document."""
    processor = _build_processor(settings)
    insights = await processor.process(args.file)

    if args.json:
        for record in processor.to_records(args.file, insights):
            print(record.model_dump_json())
        return 0

    if not insights:
        print("No insights found.")
        return 0
    print(f"\n{len(insights)} insights for {args.file.name}:")
    for insight in insights:
        print(f"  {insight.relevance:5.2f}  {insight.text}")
    return 0


async def _cmd_summary(args: argparse.Namespace, settings: Settings) -> int:
    """Print the model's prose analysis of one document."""
    processor = _build_processor(settings)
    print(await processor.quick_analyze(args.file))
    return 0


async def _cmd_extract(args: argparse.Namespace, settings: Settings) -> int:
    """Print extracted text without calling the model."""
    processor = _build_processor(settings)
    print(await processor.extract_text(args.file))
    return 0


async def _cmd_batch(args: argparse.Namespace, settings: Settings) -> int:
    """Process a directory and print a summary."""
    from docinsight.batch.orchestrator import BatchOrchestrator
    from docinsight.batch.progress import LoggingProgressSink

    directory: Path = args.directory
    if not directory.is_dir():
        logger.error("Not a directory: %s", directory)
        return 1

    processor = _build_processor(settings)
    orchestrator = BatchOrchestrator(processor, max_concurrency=args.concurrency)
    result = await orchestrator.process_directory(
        directory,
        progress=LoggingProgressSink(),
        recursive=args.recursive,
    )

    print("\nBatch complete:")
    print(f"  Files found:  {result.total}")
    print(f"  Succeeded:    {result.succeeded}")
    print(f"  Failed:       {result.failed}")
    print(f"  Duration:     {result.duration_seconds:.1f}s")
    for outcome in result.failures:
        print(f"  ! {outcome.path}: [{outcome.error_kind}] {outcome.error_message}")
    return 0


async def _cmd_info(args: argparse.Namespace, settings: Settings) -> int:
    """Print file metadata as JSON."""
    processor = _build_processor(settings)
    info = processor.file_info(args.file)
    print(json.dumps(info.model_dump(mode="json"), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
