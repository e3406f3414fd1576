"""Command line entry point for the file pipeline.

Exit code behavior:
- 0 when the pipeline completes.
- 1 when a step fails or any other exception goes uncaught.
- 2 for usage errors (argparse).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from loguru import logger

from fileops.config import EVENT_LOG, LOGGING, PIPELINE
from fileops.events import EventEmitter, attach_event_log
from fileops.pipeline.errors import PipelineError
from fileops.pipeline.runner import FilePipeline
from fileops.utils.layout import ensure_files_dir, pipeline_paths


def configure_logging(level: str = LOGGING.LEVEL) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def _fatal_excepthook(exc_type, exc, tb) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    # The interpreter exits with status 1 once the hook returns
    logger.opt(exception=(exc_type, exc, tb)).critical("There was an uncaught error: {}", exc)


def install_fatal_exception_hook() -> None:
    """Log any uncaught exception and terminate with exit status 1."""
    sys.excepthook = _fatal_excepthook


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the sequential file pipeline")
    parser.add_argument(
        "root_dir",
        nargs="?",
        default=PIPELINE.ROOT_DIR,
        help="Root directory containing files/starter.txt (default: FILEOPS_ROOT_DIR or current directory)",
    )
    parser.add_argument("--log-level", default=LOGGING.LEVEL, help="loguru level (default: FILEOPS_LOG_LEVEL or INFO)")
    parser.add_argument(
        "--event-log",
        action="store_true",
        default=EVENT_LOG.ENABLED,
        help="Append step events to logs/eventLog.txt under the root directory",
    )
    parser.add_argument("--json", action="store_true", help="Print the run result as JSON")
    parser.add_argument("--init", action="store_true", help="Create the files/ directory and exit")
    return parser


async def _run(args: argparse.Namespace) -> int:
    events: Optional[EventEmitter] = None
    if args.event_log:
        events = EventEmitter()
        attach_event_log(events, pipeline_paths(args.root_dir).logs_dir)

    pipeline = FilePipeline(args.root_dir, events=events)
    result = await pipeline.run()

    if args.json:
        print(json.dumps(result.to_payload(), indent=2, sort_keys=True))

    try:
        content = result.unwrap()
    except PipelineError as e:
        logger.error("There was an uncaught error: {}", e)
        return 1

    if not args.json:
        print(content)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(args.log_level)
    install_fatal_exception_hook()

    if args.init:
        paths = ensure_files_dir(args.root_dir)
        print(f"files_dir: {paths.files_dir}")
        return 0

    return asyncio.run(_run(args))
