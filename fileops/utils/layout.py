"""
Pipeline File Layout
====================
Helpers for resolving the on-disk layout the pipeline works against.

All paths hang off a root directory:

- files/starter.txt    input, read then deleted
- files/reply.txt      intermediate, written, appended, renamed away
- files/newreply.txt   final output, read back
- logs/eventLog.txt    optional event log
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from fileops.config import EVENT_LOG, PIPELINE, EventLogConfig, PipelineConfig


@dataclass(frozen=True)
class PipelinePaths:
    """Resolved layout paths for a pipeline root directory."""

    root_dir: Path
    files_dir: Path
    source_path: Path
    intermediate_path: Path
    final_path: Path
    logs_dir: Path
    event_log_path: Path


def validate_root_dir(root_dir: Union[str, Path]) -> Path:
    """Validate and resolve a pipeline root directory.

    A root that does not exist yet is accepted; the first read step reports
    the missing source file.

    Raises:
        ValueError: If the path is empty or exists but is not a directory.
    """
    if root_dir is None or not str(root_dir).strip():
        raise ValueError("Root directory cannot be empty")

    path = Path(root_dir).expanduser().resolve()
    if path.exists() and not path.is_dir():
        raise ValueError(f"Root directory is not a directory: {path}")

    return path


def pipeline_paths(
    root_dir: Union[str, Path],
    config: Optional[PipelineConfig] = None,
    event_log_config: Optional[EventLogConfig] = None,
) -> PipelinePaths:
    """Return the canonical layout paths for a root directory."""

    cfg = config or PIPELINE
    ev_cfg = event_log_config or EVENT_LOG

    root = validate_root_dir(root_dir)
    files_dir = root / cfg.FILES_SUBDIR
    logs_dir = root / ev_cfg.LOGS_SUBDIR

    return PipelinePaths(
        root_dir=root,
        files_dir=files_dir,
        source_path=files_dir / cfg.SOURCE_NAME,
        intermediate_path=files_dir / cfg.INTERMEDIATE_NAME,
        final_path=files_dir / cfg.FINAL_NAME,
        logs_dir=logs_dir,
        event_log_path=logs_dir / ev_cfg.FILENAME,
    )


def ensure_files_dir(root_dir: Union[str, Path], config: Optional[PipelineConfig] = None) -> PipelinePaths:
    """Ensure the files/ directory exists under the root.

    Creates only the empty folder; the operation is idempotent.
    """

    paths = pipeline_paths(root_dir, config=config)
    paths.files_dir.mkdir(parents=True, exist_ok=True)
    logger.debug("Ensured files directory at {}", paths.files_dir)
    return paths
