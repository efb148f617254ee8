"""
vidcoach.analyze.dispatcher - Parallel fan-out of analysis passes.

Submits every configured AnalyzerTask to a thread pool, waits for all of
them to settle, and collects one text per task key. A failing pass is
replaced by its fallback text and never affects its siblings.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Sequence

from vidcoach.exceptions import TranscriptError
from vidcoach.llm.tasks import ANALYSIS_TASKS, AnalysisContext, AnalyzerTask
from vidcoach.logging import logger
from vidcoach.transcript import Transcript


class AnalyzerDispatcher:
    """Runs a fixed suite of analysis passes concurrently over one transcript.

    Example:
        >>> dispatcher = AnalyzerDispatcher(client, templates)
        >>> results = dispatcher.run_all(transcript, AnalysisContext(pace_note=note))
        >>> results["video_score"]
        'OVERALL SCORE: 78/100 ...'
    """

    def __init__(
        self,
        client: Any,
        template_manager: Any,
        tasks: Sequence[AnalyzerTask] = ANALYSIS_TASKS,
        max_workers: int | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            client: LLMClient instance (anything with a compatible complete())
            template_manager: PromptTemplateManager instance
            tasks: Task table to run on every call
            max_workers: Max parallel threads (defaults to one per task)

        Raises:
            ValueError: If the task table is empty or has duplicate keys
        """
        keys = [task.key for task in tasks]
        if not keys:
            raise ValueError("At least one analysis task is required")
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"Duplicate analysis task keys: {', '.join(duplicates)}")

        self.client = client
        self.template_manager = template_manager
        self.tasks = tuple(tasks)
        self.max_workers = max_workers or len(self.tasks)

    @property
    def keys(self) -> list[str]:
        return [task.key for task in self.tasks]

    def run_all(
        self,
        transcript: Transcript,
        context: AnalysisContext | None = None,
        cancel: threading.Event | None = None,
    ) -> dict[str, str]:
        """Run every analysis pass and return their outputs keyed by task.

        Blocks until every pass has either produced text or fallen back.

        Args:
            transcript: Transcript to analyze (text must be non-empty)
            context: Auxiliary inputs for prompt construction
            cancel: Reserved; passes always run to completion

        Returns:
            Dict with exactly one entry per configured task key

        Raises:
            TranscriptError: If the transcript has no text
        """
        if not transcript.text or not transcript.text.strip():
            raise TranscriptError("Transcript text is empty; nothing to analyze")

        context = context or AnalysisContext()
        started = time.monotonic()

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="vidcoach-analyze"
        ) as executor:
            futures: dict[Future, AnalyzerTask] = {
                executor.submit(self._run_task, task, transcript, context): task
                for task in self.tasks
            }
            done, _ = wait(futures)

        results: dict[str, str] = {}
        fallbacks = 0
        for future in done:
            text, ok = future.result()
            results[futures[future].key] = text
            fallbacks += not ok

        logger.debug(
            "Ran %d analysis passes in %.1fs (%d fell back)",
            len(self.tasks),
            time.monotonic() - started,
            fallbacks,
        )
        return results

    def _run_task(
        self,
        task: AnalyzerTask,
        transcript: Transcript,
        context: AnalysisContext,
    ) -> tuple[str, bool]:
        """Build, send, and settle a single pass. Never raises."""
        try:
            request = task.build_request(transcript, context, self.template_manager)
            text = self.client.complete(
                request.prompt,
                system=request.system,
                max_tokens=request.max_tokens,
            )
            return text, True
        except Exception as e:
            logger.error("Analysis pass '%s' failed: %s", task.key, e)
            return task.fallback, False
