from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from verbi.app.models import VerbRecord  # noqa: E402


SAMPLE = [
    {"verb": "essere", "de": ["ich bin", "du bist"], "it": ["io sono", "tu sei"]},
    {"verb": "avere", "de": ["ich habe"], "it": ["io ho"]},
    {"verb": "Essere", "de": [], "it": ["io sono (bis)"]},
]


@pytest.fixture
def sample_data() -> list[dict]:
    return [dict(entry) for entry in SAMPLE]


@pytest.fixture
def sample_verbs(sample_data: list[dict]) -> list[VerbRecord]:
    return [VerbRecord.model_validate(entry) for entry in sample_data]


@pytest.fixture
def write_dataset(tmp_path: Path):
    """Write `data` (JSON-serialisable or raw text) to a temp file and return its path."""

    def _write(data, name: str = "verbs.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
