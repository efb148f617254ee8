"""
vidcoach.exceptions - Error types raised by vidcoach.

Everything derives from VidcoachError so the CLI can report any failure
with one handler. A failing analysis pass never raises one of these to the
caller; the dispatcher swaps in the pass's fallback text instead.
"""

from __future__ import annotations


class VidcoachError(Exception):
    """Base exception for all vidcoach errors."""


class ConfigError(VidcoachError):
    """vidcoach.yaml could not be read as a settings mapping."""


class TranscriptError(VidcoachError):
    """Transcript missing, empty, or not shaped like speech-to-text output."""


class LLMError(VidcoachError):
    """Text or image generation request failed."""


class LLMResponseError(LLMError):
    """The provider answered, but with no usable content."""


class ContentPolicyError(LLMError):
    """The provider's safety filters rejected the prompt."""


class CatalogError(VidcoachError):
    """Trending listing could not be fetched.

    Attributes:
        status_code: HTTP status of the failed response, if one was received
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
