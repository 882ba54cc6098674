"""Run logger for recording pipeline stage summaries to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class StageRecord(BaseModel):
    """Record of a single pipeline stage execution."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of a complete pipeline run."""

    run_id: str
    pipeline_type: str
    corpus: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    final_statement_count: int = 0
    monthly_bucket_count: int = 0
    quarterly_bucket_count: int = 0


def serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, paths, lists, dicts and
    primitives.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return serialize(dataclasses.asdict(obj))
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (list, tuple)):
        return [serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {str(serialize(k)): serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Accumulates pipeline stage records and writes a JSON log file per run.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: RunRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, pipeline_type: str, corpus: dict[str, Any]) -> None:
        """Initialize a new run record.

        Args:
            pipeline_type: Type of pipeline (e.g. "trend").
            corpus: Summary of the pipeline input (article/statement counts).
        """
        if not self._enabled:
            return

        self._record = RunRecord(
            run_id=str(uuid.uuid4()),
            pipeline_type=pipeline_type,
            corpus=serialize(corpus),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
    ) -> None:
        """Append a stage record to the current run.

        Args:
            stage: Stage name (e.g. "enrichment", "monthly_aggregation").
            component: Component name.
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            duration_seconds: Wall-clock time for this stage.
        """
        if not self._enabled or self._record is None:
            return

        self._record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=serialize(input_data),
                output=serialize(output_data),
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        statement_count: int,
        monthly_bucket_count: int,
        quarterly_bucket_count: int,
    ) -> Path | None:
        """Write the run record to a JSON file.

        Args:
            statement_count: Number of statements in the aggregated scope.
            monthly_bucket_count: Number of monthly buckets produced.
            quarterly_bucket_count: Number of quarterly buckets produced.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.final_statement_count = statement_count
        self._record.monthly_bucket_count = monthly_bucket_count
        self._record.quarterly_bucket_count = quarterly_bucket_count

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # run_2026-02-12T14-30-00.json (colons -> dashes, no microseconds/tz)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"run_{ts}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
