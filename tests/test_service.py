"""Tests for vidcoach.service module."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from vidcoach.benchmark import BenchmarkStore
from vidcoach.exceptions import LLMError, TranscriptError
from vidcoach.llm.tasks import COMPETITOR_TASKS
from vidcoach.service import AnalysisService
from vidcoach.transcript import Transcript


def _scoring_client(score: int) -> MagicMock:
    client = MagicMock()

    def complete(prompt: str, **kwargs) -> str:
        if "OVERALL SCORE" in prompt:
            return f"OVERALL SCORE: {score}/100"
        return "ok"

    client.complete.side_effect = complete
    return client


class TestAnalyze:
    def test_keeps_an_empty_injected_benchmark(
        self, mock_client: MagicMock, template_manager, sample_transcript: Transcript
    ) -> None:
        store = BenchmarkStore(min_history=1)
        service = AnalysisService(mock_client, template_manager, benchmark=store)

        assert service.benchmark is store
        service.analyze(sample_transcript)
        assert store.total_count == 1
        assert service.analyze(sample_transcript).percentile == 0

    def test_services_share_one_benchmark(
        self, mock_client: MagicMock, template_manager, sample_transcript: Transcript
    ) -> None:
        store = BenchmarkStore()
        first = AnalysisService(mock_client, template_manager, benchmark=store)
        second = AnalysisService(mock_client, template_manager, benchmark=store)

        first.analyze(sample_transcript)
        report = second.analyze(sample_transcript)

        assert report.total_analyzed == 2
        assert store.snapshot() == [72, 72]

    def test_report_contains_score(
        self, mock_client: MagicMock, template_manager, sample_transcript: Transcript
    ) -> None:
        service = AnalysisService(mock_client, template_manager)
        report = service.analyze(sample_transcript)

        assert report.overall_score == 72
        assert report.total_analyzed == 1
        assert report.percentile is None
        assert service.benchmark.snapshot() == [72]

    def test_pace_note_reaches_audio_pass(
        self, mock_client: MagicMock, template_manager, sample_transcript: Transcript
    ) -> None:
        report = AnalysisService(mock_client, template_manager).analyze(sample_transcript)

        assert report.pace_note == "Speaking pace: 168 WPM (Good - energetic)"
        prompts = [c.args[0] for c in mock_client.complete.call_args_list]
        assert any(report.pace_note in p for p in prompts)

    def test_no_segments_uses_neutral_note(
        self, mock_client: MagicMock, template_manager
    ) -> None:
        report = AnalysisService(mock_client, template_manager).analyze(
            Transcript(text="Hello and welcome back to the channel")
        )
        assert report.pace_note.startswith("Speaking pace: unknown")

    def test_percentile_after_history(self, template_manager, sample_transcript: Transcript) -> None:
        benchmark = BenchmarkStore()
        for score in (40, 45, 50, 50, 60, 65, 70, 80, 90, 95):
            benchmark.record_and_rank(score)

        service = AnalysisService(_scoring_client(55), template_manager, benchmark=benchmark)
        report = service.analyze(sample_transcript)

        assert report.overall_score == 55
        assert report.percentile == 40
        assert report.total_analyzed == 11

    def test_missing_score_leaves_benchmark_untouched(
        self, template_manager, sample_transcript: Transcript
    ) -> None:
        client = MagicMock()
        client.complete.return_value = "No numbers here."
        benchmark = BenchmarkStore()
        benchmark.record_and_rank(60)

        report = AnalysisService(client, template_manager, benchmark=benchmark).analyze(
            sample_transcript
        )

        assert report.overall_score is None
        assert report.percentile is None
        assert report.total_analyzed == 1
        assert benchmark.snapshot() == [60]

    def test_failed_score_pass_leaves_benchmark_untouched(
        self, template_manager, sample_transcript: Transcript
    ) -> None:
        client = MagicMock()
        client.complete.side_effect = LLMError("timeout")
        service = AnalysisService(client, template_manager)

        report = service.analyze(sample_transcript)

        assert report.results["video_score"] == "Video score could not be generated at this time."
        assert report.overall_score is None
        assert len(service.benchmark) == 0

    def test_zero_score_is_recorded(self, template_manager, sample_transcript: Transcript) -> None:
        service = AnalysisService(_scoring_client(0), template_manager)
        report = service.analyze(sample_transcript)

        assert report.overall_score == 0
        assert service.benchmark.snapshot() == [0]

    def test_empty_transcript_raises(self, mock_client: MagicMock, template_manager) -> None:
        service = AnalysisService(mock_client, template_manager)
        with pytest.raises(TranscriptError):
            service.analyze(Transcript(text=""))
        assert len(service.benchmark) == 0

    def test_to_dict(
        self, mock_client: MagicMock, template_manager, sample_transcript: Transcript
    ) -> None:
        data = AnalysisService(mock_client, template_manager).analyze(sample_transcript).to_dict()

        assert data["overall_score"] == 72
        assert data["total_analyzed"] == 1
        assert "tips" in data
        assert "quick_summary" in data


class TestAnalyzeCompetitor:
    def test_returns_competitor_keys(
        self, mock_client: MagicMock, template_manager, sample_transcript: Transcript
    ) -> None:
        results = AnalysisService(mock_client, template_manager).analyze_competitor(
            sample_transcript
        )
        assert set(results) == {task.key for task in COMPETITOR_TASKS}

    def test_does_not_touch_benchmark(
        self, mock_client: MagicMock, template_manager, sample_transcript: Transcript
    ) -> None:
        service = AnalysisService(mock_client, template_manager)
        service.analyze_competitor(sample_transcript)
        assert service.benchmark.total_count == 0


class TestStats:
    def test_stats_reflect_recorded_scores(
        self, template_manager, sample_transcript: Transcript
    ) -> None:
        service = AnalysisService(_scoring_client(80), template_manager)
        service.analyze(sample_transcript)
        service.analyze(sample_transcript)

        stats = service.stats()
        assert stats.total_analyzed == 2
        assert stats.average_score == 80
