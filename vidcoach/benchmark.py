"""
vidcoach.benchmark - Rolling benchmark of overall scores.

Keeps a bounded, chronological history of overall scores and ranks each
new score against it. The history lives for the lifetime of the process;
every mutation goes through record_and_rank() under the store's lock.
"""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from vidcoach.utils import round_half_up

MAX_SCORES = 1000
MIN_HISTORY_FOR_PERCENTILE = 10


@dataclass(frozen=True)
class Ranking:
    """Outcome of recording one score."""

    percentile: int | None
    total_count: int


@dataclass(frozen=True)
class BenchmarkStats:
    total_analyzed: int
    average_score: int


class BenchmarkStore:
    """Bounded FIFO score history with percentile ranking."""

    def __init__(
        self,
        capacity: int = MAX_SCORES,
        min_history: int = MIN_HISTORY_FOR_PERCENTILE,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if min_history < 1:
            raise ValueError("min_history must be at least 1")
        self.capacity = capacity
        self.min_history = min_history
        self._history: deque[int] = deque(maxlen=capacity)
        self._total = 0
        self._lock = threading.Lock()

    @property
    def total_count(self) -> int:
        """Scores recorded since the store was created, including evicted ones."""
        return self._total

    def __len__(self) -> int:
        return len(self._history)

    def _rank(self, score: int) -> int | None:
        if len(self._history) < self.min_history:
            return None
        below = sum(1 for h in self._history if h < score)
        return round_half_up(100 * below / len(self._history))

    def record_and_rank(self, score: int) -> Ranking:
        """Rank a score against the history, then append it.

        The score is ranked against the history as it was before this call;
        ties do not count as below. Past capacity the oldest score is evicted.

        Args:
            score: Overall score to record

        Returns:
            Ranking with the percentile (or None) and the total count after recording
        """
        with self._lock:
            percentile = self._rank(score)
            self._history.append(score)
            self._total += 1
            return Ranking(percentile=percentile, total_count=self._total)

    def snapshot(self) -> list[int]:
        """Copy of the history, oldest first."""
        with self._lock:
            return list(self._history)

    def average_score(self) -> int:
        """Rounded mean of the history, 0 when empty."""
        with self._lock:
            if not self._history:
                return 0
            return round_half_up(sum(self._history) / len(self._history))

    def stats(self) -> BenchmarkStats:
        return BenchmarkStats(total_analyzed=self.total_count, average_score=self.average_score())
