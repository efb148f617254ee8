"""
vidcoach.analyze.pacing - Speaking pace from segment timestamps.

Computes words per minute over the span covered by the transcript's
segments and assigns a qualitative pace bucket.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from vidcoach.transcript import Segment, Transcript
from vidcoach.utils import round_half_up

NEUTRAL_PACE_NOTE = "Speaking pace: unknown (no segment timestamps available)"


class PaceBucket(str, Enum):
    SLOW = "slow"
    CONVERSATIONAL = "good/conversational"
    ENERGETIC = "good/energetic"
    FAST = "fast"


# (exclusive upper bound, bucket); anything past the last bound is FAST
PACE_THRESHOLDS: tuple[tuple[int, PaceBucket], ...] = (
    (120, PaceBucket.SLOW),
    (150, PaceBucket.CONVERSATIONAL),
    (180, PaceBucket.ENERGETIC),
)

PACE_LABELS = {
    PaceBucket.SLOW: "SLOW - might lose viewers",
    PaceBucket.CONVERSATIONAL: "Good - conversational",
    PaceBucket.ENERGETIC: "Good - energetic",
    PaceBucket.FAST: "FAST - might be hard to follow",
}


@dataclass(frozen=True)
class Pace:
    words_per_minute: int
    bucket: PaceBucket

    def describe(self) -> str:
        return f"Speaking pace: {self.words_per_minute} WPM ({PACE_LABELS[self.bucket]})"


def classify_pace(words_per_minute: int) -> PaceBucket:
    """Map a words-per-minute rate to its pace bucket."""
    for upper, bucket in PACE_THRESHOLDS:
        if words_per_minute < upper:
            return bucket
    return PaceBucket.FAST


def compute_pace(segments: Sequence[Segment], word_count: int) -> Pace:
    """Compute speaking pace over the span of the given segments.

    Args:
        segments: Ordered transcript segments
        word_count: Words spoken across the whole transcript

    Returns:
        Pace with rounded words per minute and its bucket

    Raises:
        ValueError: If there are no segments or they span no time
    """
    if not segments:
        raise ValueError("Cannot compute pace without segments")

    duration = segments[-1].end - segments[0].start
    if duration <= 0:
        raise ValueError(f"Segments span a non-positive duration ({duration:.3f}s)")

    wpm = round_half_up(word_count / duration * 60)
    return Pace(words_per_minute=wpm, bucket=classify_pace(wpm))


def describe_pace(transcript: Transcript) -> str:
    """Human-readable pace line for prompts, or the neutral note when pace is unavailable."""
    if not transcript.segments or transcript.duration_seconds <= 0:
        return NEUTRAL_PACE_NOTE
    return compute_pace(transcript.segments, transcript.word_count).describe()
