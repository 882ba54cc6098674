"""Write pipeline results as JSON."""

import json
from pathlib import Path
from typing import Any

from rhetoric_trends.pipeline import PipelineResult
from rhetoric_trends.run_logger import serialize


def result_to_dict(result: PipelineResult) -> dict[str, Any]:
    """Convert a pipeline result to a JSON-compatible dict."""
    return {
        "enriched": serialize(result.enriched),
        "monthly": serialize(result.monthly),
        "quarterly": serialize(result.quarterly),
    }


def write_result(result: PipelineResult, path: Path | str) -> Path:
    """Write a pipeline result to ``path``, creating parent directories.

    Returns:
        The path written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(result_to_dict(result), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    return path
