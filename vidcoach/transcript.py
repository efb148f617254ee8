"""
vidcoach.transcript - Transcript value types.

Parses speech-to-text "verbose_json" output (full text plus timestamped
segments) into immutable values consumed by the analysis passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from vidcoach.exceptions import TranscriptError


@dataclass(frozen=True)
class Segment:
    """A timestamped stretch of speech, in seconds from the start of the media."""

    start: float
    end: float
    text: str = ""

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Transcript:
    """Full transcript text with its ordered segments."""

    text: str
    segments: tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @property
    def duration_seconds(self) -> float:
        if not self.segments:
            return 0.0
        return self.segments[-1].end - self.segments[0].start

    def first_words(self, count: int) -> str:
        """Return the opening `count` words of the transcript."""
        return " ".join(self.text.split()[:count])

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Transcript:
        """Build a Transcript from a speech-to-text response dict.

        Args:
            payload: Dict with "text" and an optional "segments" list of
                {"start", "end", "text"} dicts

        Returns:
            Transcript instance

        Raises:
            TranscriptError: If the payload is not shaped like a transcript
        """
        if not isinstance(payload, dict):
            raise TranscriptError("Transcript payload must be a JSON object")

        text = payload.get("text")
        if not isinstance(text, str):
            raise TranscriptError("Transcript payload has no 'text' field")

        segments = []
        for i, seg in enumerate(payload.get("segments") or []):
            try:
                segments.append(
                    Segment(
                        start=float(seg["start"]),
                        end=float(seg["end"]),
                        text=str(seg.get("text", "")).strip(),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                raise TranscriptError(f"Malformed segment at index {i}: {e}") from e

        return cls(text=text.strip(), segments=tuple(segments))


def load_transcript(path: Path) -> Transcript:
    """Load a transcript from a speech-to-text JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        TranscriptError: If the file is not a valid transcript
    """
    import json

    from vidcoach.io import read_json

    try:
        payload = read_json(path)
    except json.JSONDecodeError as e:
        raise TranscriptError(f"Invalid JSON in {path}: {e}") from e
    return Transcript.from_payload(payload)
