"""Sequential file pipeline runner.

Runs a fixed chain of filesystem steps against a root directory:

    read starter -> delete starter -> write reply -> append marker
    -> rename reply to newreply -> read newreply

Each blocking call runs in a worker thread and is awaited before the next step
starts, so steps never overlap. The chain is forward-only: the first failure
stops the run and nothing already done is undone.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger
from opentelemetry.trace import Status, StatusCode

from fileops.config import PIPELINE, PipelineConfig
from fileops.events.emitter import EventEmitter
from fileops.events.event_log import LOG_EVENT
from fileops.pipeline.context import PipelineResult
from fileops.pipeline.errors import PipelineError, classify_exception, describe_exception
from fileops.pipeline.steps import PipelineStep, default_steps, execute_step
from fileops.tracing import init_tracing, safe_set_span_attributes
from fileops.utils.layout import pipeline_paths


class FilePipeline:
    """Single-use pipeline over one root directory.

    Args:
        root_dir: Directory holding the ``files`` subdirectory.
        steps: Ordered steps; defaults to the standard six-step chain.
        events: Optional emitter receiving ``log`` events per step.
        config: Pipeline configuration; defaults to the environment-derived one.
    """

    def __init__(
        self,
        root_dir: Union[str, Path],
        steps: Optional[Sequence[PipelineStep]] = None,
        *,
        events: Optional[EventEmitter] = None,
        config: Optional[PipelineConfig] = None,
    ):
        self.config = config or PIPELINE
        self.paths = pipeline_paths(root_dir, config=self.config)
        self.steps: List[PipelineStep] = list(steps) if steps is not None else default_steps(self.paths, self.config)
        self.events = events
        self._started = False

    def _emit(self, message: str) -> None:
        if self.events is None:
            return
        # Listener failures are logged and never stop the run
        try:
            self.events.emit(LOG_EVENT, message)
        except Exception:
            logger.exception("Event listener failed for message='{}'", message)

    async def _run_step(self, step: PipelineStep, carried: Optional[str]) -> Optional[str]:
        try:
            return await asyncio.to_thread(execute_step, step, carried, self.config)
        except (OSError, UnicodeError) as e:
            kind = classify_exception(e, missing_is_not_found=step.requires_existing_source)
            raise PipelineError(
                kind,
                step.name.value,
                step.index,
                describe_exception(e),
                path=step.source,
            ) from e

    async def run(self) -> PipelineResult:
        """Execute every step in order, stopping at the first failure.

        Returns:
            PipelineResult with the final content, or the captured PipelineError.

        Raises:
            RuntimeError: If this pipeline instance already ran.
        """
        if self._started:
            raise RuntimeError("FilePipeline instances run exactly once")
        self._started = True

        result = PipelineResult(root_dir=self.paths.root_dir)
        result.mark_checkpoint("start")
        logger.info("Starting file pipeline run_id='{}' root_dir='{}'", result.run_id, self.paths.root_dir)

        tracer = init_tracing()
        carried: Optional[str] = None

        with tracer.start_as_current_span("file_pipeline.run") as run_span:
            safe_set_span_attributes(
                run_span,
                {"fileops.run_id": result.run_id, "fileops.root_dir": str(self.paths.root_dir), "fileops.steps": len(self.steps)},
            )

            for step in self.steps:
                with tracer.start_as_current_span(f"file_pipeline.step.{step.name.value}") as span:
                    safe_set_span_attributes(span, {"fileops.step.index": step.index, "fileops.step.path": str(step.source)})

                    self._emit(f"{step.name.value} started")
                    logger.debug("Step {} started on {}", step.label, step.source)

                    try:
                        carried = await self._run_step(step, carried)
                    except PipelineError as e:
                        safe_set_span_attributes(span, {"fileops.error.kind": e.kind.value})
                        safe_set_span_attributes(
                            run_span,
                            {"fileops.success": False, "fileops.error.kind": e.kind.value, "fileops.error.step": step.label},
                        )
                        run_span.set_status(Status(StatusCode.ERROR, str(e)))
                        logger.error("File pipeline failed at {}: {}", step.label, e)
                        result.record_failure(e)
                        result.mark_checkpoint("end")
                        self._emit(f"{step.name.value} failed: {e.kind.value}: {e.message}")
                        return result

                    result.record_step(step.label)
                    self._emit(f"{step.name.value} completed")
                    logger.debug("Step {} completed", step.label)

            result.content = carried if carried is not None else ""
            result.mark_checkpoint("end")
            safe_set_span_attributes(run_span, {"fileops.success": True})

        self._emit("pipeline completed")
        logger.info("File pipeline complete run_id='{}' ({} steps)", result.run_id, len(result.completed_steps))
        return result


async def run_file_pipeline(
    root_dir: Union[str, Path],
    *,
    events: Optional[EventEmitter] = None,
    config: Optional[PipelineConfig] = None,
) -> str:
    """Run the standard pipeline once and return the final file content.

    Raises:
        PipelineError: On the first failing step.
    """

    pipeline = FilePipeline(root_dir, events=events, config=config)
    result = await pipeline.run()
    return result.unwrap()
