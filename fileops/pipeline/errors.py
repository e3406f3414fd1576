"""Pipeline error taxonomy.

Every step failure is wrapped in a PipelineError that names the failing step,
its position in the sequence and the path it was working on. The original
exception is kept as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class PipelineErrorKind(str, Enum):
    """Classification of a step failure."""

    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    ENCODING_ERROR = "encoding_error"


class PipelineError(RuntimeError):
    """A step failed; the pipeline stopped without cleanup."""

    def __init__(
        self,
        kind: PipelineErrorKind,
        step: str,
        index: int,
        message: str,
        path: Optional[Path] = None,
    ):
        self.kind = kind
        self.step = step
        self.index = index
        self.message = message
        self.path = path
        super().__init__(f"step {index} ({step}) failed [{kind.value}]: {message}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "step": self.step,
            "index": self.index,
            "path": str(self.path) if self.path is not None else None,
            "message": self.message,
        }


def classify_exception(exc: BaseException, *, missing_is_not_found: bool) -> PipelineErrorKind:
    """Map a low-level exception to a PipelineErrorKind.

    A missing file is NOT_FOUND only where the step requires an existing
    source to read. Delete and rename report a vanished file as IO_ERROR.
    """
    if isinstance(exc, UnicodeError):
        return PipelineErrorKind.ENCODING_ERROR
    if isinstance(exc, FileNotFoundError) and missing_is_not_found:
        return PipelineErrorKind.NOT_FOUND
    return PipelineErrorKind.IO_ERROR


def describe_exception(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return f"{type(exc).__name__}: {exc.strerror}"
    return f"{type(exc).__name__}: {exc}"
