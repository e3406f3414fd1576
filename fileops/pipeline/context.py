"""Pipeline run result.

This module defines the small state object a pipeline run produces: either the
final content or the first step failure, plus checkpoints for debugging.

It holds only stable primitives and is never persisted by the pipeline; the
payload form exists for logging and command line output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fileops.pipeline.errors import PipelineError
from fileops.utils.schema_validation import validate_pipeline_result


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""

    root_dir: Path
    run_id: str = field(default_factory=lambda: uuid4().hex)
    created_at: str = field(default_factory=_utc_now_iso)

    content: Optional[str] = None
    error: Optional[PipelineError] = None

    completed_steps: List[str] = field(default_factory=list)
    checkpoints: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.error is None and self.content is not None

    def mark_checkpoint(self, name: str) -> None:
        if not name.strip():
            return
        self.checkpoints[name] = _utc_now_iso()

    def record_step(self, label: str) -> None:
        self.completed_steps.append(label)
        self.mark_checkpoint(label)

    def record_failure(self, error: PipelineError) -> None:
        if self.error is not None:
            return
        self.error = error
        self.content = None

    def unwrap(self) -> str:
        """Return the final content or raise the captured failure."""
        if self.error is not None:
            raise self.error
        if self.content is None:
            raise RuntimeError("Pipeline has not produced a result")
        return self.content

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "schema_version": "1.0",
            "run_id": self.run_id,
            "created_at": self.created_at,
            "root_dir": str(self.root_dir),
            "success": self.success,
            "content": self.content,
            "error": self.error.to_dict() if self.error is not None else None,
            "completed_steps": list(self.completed_steps),
            "checkpoints": dict(self.checkpoints),
        }
        validate_pipeline_result(payload)
        return payload
