"""Pipeline-first architecture for Evol-Instruct question generation.

This module provides a small stage runner where:
- Each Stage reads the shared context and returns a partial update
- GraphRunner chains named stages and merges updates by key replacement
- PipelineContext carries state between stages
- Async execution is supported throughout
"""

from .base import END, GraphRunner, Stage, StageNotFoundError
from .context import ContextKey, PipelineContext
from .evol_pipeline import (
    EvolInstructPipeline,
    GenerationError,
    filter_result,
    run_evol_pipeline,
)

__all__ = [
    "END",
    "GraphRunner",
    "Stage",
    "StageNotFoundError",
    "ContextKey",
    "PipelineContext",
    "EvolInstructPipeline",
    "GenerationError",
    "filter_result",
    "run_evol_pipeline",
]
