"""Pipeline step definitions and their blocking filesystem operations.

Steps are immutable. The runner executes them in declaration order and hands
each one the text carried from the most recent read.
"""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from fileops.config import PIPELINE, PipelineConfig
from fileops.utils.layout import PipelinePaths


class StepName(str, Enum):
    READ = "read"
    DELETE = "delete"
    WRITE = "write"
    APPEND = "append"
    RENAME = "rename"


@dataclass(frozen=True)
class PipelineStep:
    """One filesystem operation in the sequence.

    ``payload`` is the literal text for an append. A write without a payload
    writes the content carried from the previous read. ``target`` is only
    used by rename.
    """

    name: StepName
    index: int
    source: Path
    payload: Optional[str] = None
    target: Optional[Path] = None

    @property
    def label(self) -> str:
        return f"{self.index}:{self.name.value}"

    @property
    def requires_existing_source(self) -> bool:
        return self.name == StepName.READ


def default_steps(paths: PipelinePaths, config: Optional[PipelineConfig] = None) -> List[PipelineStep]:
    """Build the read -> delete -> write -> append -> rename -> read chain."""

    cfg = config or PIPELINE
    return [
        PipelineStep(StepName.READ, 1, paths.source_path),
        PipelineStep(StepName.DELETE, 2, paths.source_path),
        PipelineStep(StepName.WRITE, 3, paths.intermediate_path),
        PipelineStep(StepName.APPEND, 4, paths.intermediate_path, payload=cfg.APPEND_SUFFIX),
        PipelineStep(StepName.RENAME, 5, paths.intermediate_path, target=paths.final_path),
        PipelineStep(StepName.READ, 6, paths.final_path),
    ]


def read_text(path: Path, encoding: str) -> str:
    # Decode strictly so invalid bytes surface as UnicodeDecodeError
    return path.read_bytes().decode(encoding)


def delete_file(path: Path) -> None:
    path.unlink()


def _write(path: Path, text: str, mode: str, encoding: str, fsync: bool) -> None:
    with open(path, mode, encoding=encoding, newline="") as f:
        f.write(text)
        f.flush()
        if fsync:
            os.fsync(f.fileno())


def write_text(path: Path, text: str, encoding: str, fsync: bool = True) -> None:
    _write(path, text, "w", encoding, fsync)


def append_text(path: Path, text: str, encoding: str, fsync: bool = True) -> None:
    _write(path, text, "a", encoding, fsync)


def rename_file(source: Path, target: Path, overwrite: bool = True) -> None:
    """Rename within one filesystem.

    Cross-device renames raise the OS error (EXDEV); there is no copy fallback.
    """
    if overwrite:
        os.replace(source, target)
        return

    if target.exists():
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(target))
    os.rename(source, target)


def execute_step(step: PipelineStep, carried: Optional[str], config: PipelineConfig) -> Optional[str]:
    """Run a single step synchronously.

    Returns the text read by a read step, otherwise ``carried`` unchanged.
    """

    if step.name == StepName.READ:
        return read_text(step.source, config.ENCODING)

    if step.name == StepName.DELETE:
        delete_file(step.source)
        return carried

    if step.name == StepName.WRITE:
        text = step.payload if step.payload is not None else carried
        if text is None:
            raise ValueError(f"Step {step.label} has no content to write")
        write_text(step.source, text, config.ENCODING, fsync=config.FSYNC)
        return carried

    if step.name == StepName.APPEND:
        append_text(step.source, step.payload or "", config.ENCODING, fsync=config.FSYNC)
        return carried

    if step.name == StepName.RENAME:
        if step.target is None:
            raise ValueError(f"Step {step.label} has no rename target")
        rename_file(step.source, step.target, overwrite=config.RENAME_OVERWRITE)
        return carried

    raise ValueError(f"Unknown step: {step.name}")
