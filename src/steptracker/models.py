"""
Pydantic models and schemas for the step tracker.

All models use strict validation and provide deterministic serialization
so run reports can be compared and audited.
"""

import hashlib
from datetime import datetime
from typing import Any, Dict, List, Optional

import orjson
from pydantic import BaseModel, Field, field_validator


def compute_hash(obj: Any) -> str:
    """
    Compute deterministic SHA-256 hash of any JSON-serializable object.

    Uses orjson with sorted keys for stable serialization.
    """
    serialized = orjson.dumps(obj, option=orjson.OPT_SORT_KEYS)
    return hashlib.sha256(serialized).hexdigest()


class StrictBaseModel(BaseModel):
    """Base model with strict validation and deterministic serialization."""

    class Config:
        extra = "forbid"  # Reject unknown fields
        validate_assignment = True

    def model_dump_json(self, **kwargs) -> str:
        """Deterministic JSON serialization using orjson."""
        return orjson.dumps(
            self.model_dump(**kwargs),
            option=orjson.OPT_SORT_KEYS
        ).decode('utf-8')


# ============================================================================
# Configuration
# ============================================================================

class TrackerConfig(StrictBaseModel):
    """
    Fixed parameters of the step tracker pipeline.

    Passed explicitly into every stage instead of living in module globals.
    """
    input_file: str = Field(default="steps.txt", min_length=1)
    min_days: int = Field(default=30, ge=0, description="Minimum values required after load")
    exact_count: bool = Field(default=False, description="Keep only the first min_days values")

    # Display
    field_width: int = Field(default=6, ge=1)
    columns: int = Field(default=10, ge=1, description="Values per printed row")
    preview_count: int = Field(default=3, ge=0)

    # Mutation script
    reserve_headroom: int = Field(default=64, ge=0)
    append_step: int = 50
    seed_value: int = 5000
    edge_delta: int = 250
    sentinel: int = 7777
    baseline_value: int = 5000
    baseline_preview: int = Field(default=10, ge=0)

    # Shift and top-K
    shift_delta: int = 100
    top_k: int = Field(default=5, ge=0)


# ============================================================================
# Report Models
# ============================================================================

class SequenceStats(StrictBaseModel):
    """Read-only statistics over the current sequence state."""
    count: int = Field(..., ge=0)
    capacity: int = Field(..., ge=0)
    total: int
    mean: float
    minimum: Optional[int] = None
    min_index: Optional[int] = None
    maximum: Optional[int] = None
    max_index: Optional[int] = None
    front: Optional[int] = None
    back: Optional[int] = None
    preview: List[int] = Field(default_factory=list)

    @property
    def mean_display(self) -> str:
        """Mean rendered to one decimal place."""
        return f"{self.mean:.1f}"


class MutationStepReport(StrictBaseModel):
    """Outcome of a single step of the mutation script."""
    step: str
    applied: bool
    size: int = Field(..., ge=0)
    capacity: int = Field(..., ge=0)
    detail: str = ""


class RunReport(StrictBaseModel):
    """Summary of a complete pipeline run."""
    run_id: str
    start_time: str
    end_time: Optional[str] = None
    config: Dict[str, Any]
    input_file: str
    input_hash: str
    initial_stats: SequenceStats
    mutation_steps: List[MutationStepReport] = Field(default_factory=list)
    final_values: List[int] = Field(default_factory=list)
    top_k: List[int] = Field(default_factory=list)

    @field_validator('top_k')
    @classmethod
    def validate_top_k(cls, v: List[int]) -> List[int]:
        """Top-K values must be in descending order."""
        if any(a < b for a, b in zip(v, v[1:])):
            raise ValueError("top_k values must be sorted descending")
        return v


def new_run_id() -> str:
    """Timestamp-based run identifier."""
    return datetime.utcnow().strftime("%Y%m%d_%H%M%S")
