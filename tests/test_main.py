"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from main import CLIArgs, run
from rhetoric_trends.config import get_default_config_path


@pytest.fixture
def corpus_path(tmp_path: Path) -> Path:
    path = tmp_path / "statements.json"
    corpus = [
        {
            "article_url": "https://example.com/1",
            "article_date": "2024-05-14",
            "statements": [
                {"speaker": "Lin Jian", "topic": "US tariffs", "tone": "assertive"},
                {"speaker": "Lin Jian", "topic": "Anti-corruption", "tone": "neutral"},
            ],
        }
    ]
    path.write_text(json.dumps(corpus), encoding="utf-8")
    return path


def test_missing_input_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="Input file not found"):
        CLIArgs(input=tmp_path / "missing.json", config=get_default_config_path())


def test_missing_config_rejected(corpus_path: Path, tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="Config file not found"):
        CLIArgs(input=corpus_path, config=tmp_path / "missing.yaml")


def test_run_writes_output(corpus_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "trends.json"
    run(CLIArgs(input=corpus_path, config=get_default_config_path(), output=output))

    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["enriched"]) == 2
    assert data["monthly"][0]["total"] == 1


def test_run_all_statements(corpus_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "trends.json"
    run(
        CLIArgs(
            input=corpus_path,
            config=get_default_config_path(),
            output=output,
            all_statements=True,
        )
    )

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["monthly"][0]["total"] == 2


def test_run_with_log(corpus_path: Path, tmp_path: Path) -> None:
    log_dir = tmp_path / "run-logs"
    run(
        CLIArgs(
            input=corpus_path,
            config=get_default_config_path(),
            log=True,
            log_dir=str(log_dir),
        )
    )

    [log_file] = list(log_dir.iterdir())
    assert json.loads(log_file.read_text())["pipeline_type"] == "trend"
