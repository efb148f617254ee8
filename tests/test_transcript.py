"""Tests for vidcoach.transcript module."""

from __future__ import annotations

from pathlib import Path

import pytest

from vidcoach.exceptions import TranscriptError
from vidcoach.transcript import Segment, Transcript, load_transcript


class TestFromPayload:
    def test_parses_text_and_segments(self, sample_payload: dict) -> None:
        transcript = Transcript.from_payload(sample_payload)

        assert transcript.text.startswith("So today")
        assert len(transcript.segments) == 3
        assert transcript.segments[1] == Segment(start=4.2, end=6.0, text="at home.")

    def test_segments_optional(self) -> None:
        transcript = Transcript.from_payload({"text": "Just text"})
        assert transcript.segments == ()

    def test_null_segments(self) -> None:
        transcript = Transcript.from_payload({"text": "Just text", "segments": None})
        assert transcript.segments == ()

    def test_missing_text_raises(self) -> None:
        with pytest.raises(TranscriptError, match="text"):
            Transcript.from_payload({"segments": []})

    def test_non_object_raises(self) -> None:
        with pytest.raises(TranscriptError):
            Transcript.from_payload(["not", "a", "transcript"])  # type: ignore[arg-type]

    def test_malformed_segment_raises(self) -> None:
        payload = {"text": "hi", "segments": [{"start": 0.0, "end": 1.0}, {"start": "soon"}]}
        with pytest.raises(TranscriptError, match="index 1"):
            Transcript.from_payload(payload)


class TestTranscriptProperties:
    def test_word_count(self, sample_transcript: Transcript) -> None:
        assert sample_transcript.word_count == 28

    def test_word_count_collapses_whitespace(self) -> None:
        assert Transcript(text="  one\ttwo\n\nthree  ").word_count == 3

    def test_duration_spans_first_start_to_last_end(self) -> None:
        transcript = Transcript(
            text="x", segments=(Segment(2.0, 5.0), Segment(5.0, 9.0), Segment(9.0, 14.5))
        )
        assert transcript.duration_seconds == 12.5

    def test_duration_without_segments(self) -> None:
        assert Transcript(text="x").duration_seconds == 0.0

    def test_first_words(self, sample_transcript: Transcript) -> None:
        assert sample_transcript.first_words(3) == "So today I'm"

    def test_first_words_beyond_length(self) -> None:
        assert Transcript(text="short one").first_words(100) == "short one"

    def test_segment_duration(self) -> None:
        assert Segment(start=1.5, end=4.0).duration == 2.5


class TestLoadTranscript:
    def test_loads_file(self, transcript_file: Path) -> None:
        transcript = load_transcript(transcript_file)
        assert transcript.word_count == 28

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_transcript(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("not json")
        with pytest.raises(TranscriptError, match="Invalid JSON"):
            load_transcript(path)
