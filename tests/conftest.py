"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from vidcoach.llm.templates import PromptTemplateManager
from vidcoach.transcript import Transcript

SCORE_REPORT = """1. OVERALL SCORE: 72/100

2. CATEGORY SCORES (each out of 100):
- Hook Strength: 65 - Opens with a question but takes a while to land.
- Content Value: 80 - Concrete, useful steps.
"""


@pytest.fixture
def sample_payload() -> dict:
    """Return a sample speech-to-text verbose_json payload."""
    return {
        "text": " So today I'm going to show you the fastest way to brew pour-over coffee "
        "at home. You only need three things, and the whole process takes five minutes.",
        "segments": [
            {
                "id": 0,
                "start": 0.0,
                "end": 4.2,
                "text": " So today I'm going to show you the fastest way to brew pour-over coffee",
            },
            {
                "id": 1,
                "start": 4.2,
                "end": 6.0,
                "text": " at home.",
            },
            {
                "id": 2,
                "start": 6.0,
                "end": 10.0,
                "text": " You only need three things, and the whole process takes five minutes.",
            },
        ],
    }


@pytest.fixture
def sample_transcript(sample_payload: dict) -> Transcript:
    return Transcript.from_payload(sample_payload)


@pytest.fixture
def transcript_file(tmp_path: Path, sample_payload: dict) -> Path:
    path = tmp_path / "transcript.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


@pytest.fixture
def template_manager() -> PromptTemplateManager:
    return PromptTemplateManager()


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock LLM client: the score pass gets a score report, every other pass gets fixed text."""
    client = MagicMock()
    client.model = "test-model"

    def complete(prompt: str, system: str | None = None, max_tokens: int = 500, **kwargs) -> str:
        if "OVERALL SCORE" in prompt:
            return SCORE_REPORT
        return f"analysis ({max_tokens} tokens)"

    client.complete.side_effect = complete
    client.get_token_usage.return_value = {
        "prompt_tokens": 0,
        "completion_tokens": 0,
        "total_tokens": 0,
    }
    return client
