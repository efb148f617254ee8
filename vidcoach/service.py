"""
vidcoach.service - Core analysis entrypoint.

Wires the pace calculation, the parallel analysis passes, score extraction
and the benchmark together. Shared stores are passed in so each service
(and each test) owns its own state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vidcoach.analyze.dispatcher import AnalyzerDispatcher
from vidcoach.analyze.pacing import describe_pace
from vidcoach.analyze.scoring import extract_overall_score
from vidcoach.benchmark import BenchmarkStats, BenchmarkStore
from vidcoach.llm.tasks import (
    ANALYSIS_TASKS,
    COMPETITOR_TASKS,
    VIDEO_SCORE_KEY,
    AnalysisContext,
)
from vidcoach.logging import logger
from vidcoach.transcript import Transcript


@dataclass(frozen=True)
class AnalysisReport:
    """Everything produced for one analyzed transcript."""

    results: dict[str, str]
    overall_score: int | None
    percentile: int | None
    total_analyzed: int
    pace_note: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.results,
            "overall_score": self.overall_score,
            "percentile": self.percentile,
            "total_analyzed": self.total_analyzed,
            "pace_note": self.pace_note,
        }


class AnalysisService:
    """Runs the full content report and ranks its overall score."""

    def __init__(
        self,
        client: Any,
        template_manager: Any,
        benchmark: BenchmarkStore | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.benchmark = benchmark if benchmark is not None else BenchmarkStore()
        self.dispatcher = AnalyzerDispatcher(
            client, template_manager, ANALYSIS_TASKS, max_workers=max_workers
        )
        self.competitor_dispatcher = AnalyzerDispatcher(
            client, template_manager, COMPETITOR_TASKS, max_workers=max_workers
        )

    def analyze(self, transcript: Transcript) -> AnalysisReport:
        """Produce the content report for a transcript.

        Raises:
            TranscriptError: If the transcript has no text
        """
        pace_note = describe_pace(transcript)
        results = self.dispatcher.run_all(transcript, AnalysisContext(pace_note=pace_note))

        overall_score = extract_overall_score(results[VIDEO_SCORE_KEY])
        if overall_score is None:
            logger.warning("No overall score found in the score report; benchmark unchanged")
            percentile = None
            total = self.benchmark.total_count
        else:
            ranking = self.benchmark.record_and_rank(overall_score)
            percentile = ranking.percentile
            total = ranking.total_count

        return AnalysisReport(
            results=results,
            overall_score=overall_score,
            percentile=percentile,
            total_analyzed=total,
            pace_note=pace_note,
        )

    def analyze_competitor(self, transcript: Transcript) -> dict[str, str]:
        """Break down someone else's video; does not touch the benchmark.

        Raises:
            TranscriptError: If the transcript has no text
        """
        return self.competitor_dispatcher.run_all(transcript)

    def stats(self) -> BenchmarkStats:
        return self.benchmark.stats()
