"""Sequential file pipeline.

The runner executes a fixed, forward-only chain of filesystem steps and stops
at the first failure.
"""

from fileops.pipeline.context import PipelineResult
from fileops.pipeline.errors import PipelineError, PipelineErrorKind
from fileops.pipeline.runner import FilePipeline, run_file_pipeline
from fileops.pipeline.steps import PipelineStep, StepName, default_steps

__all__ = [
    "FilePipeline",
    "PipelineError",
    "PipelineErrorKind",
    "PipelineResult",
    "PipelineStep",
    "StepName",
    "default_steps",
    "run_file_pipeline",
]
