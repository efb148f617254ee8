"""
vidcoach.llm.creative - Script writer and thumbnail generator.

Standalone generation tools that don't need a transcript: a full video
script from a topic, and a thumbnail image from a title or topic.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from vidcoach.logging import logger

SCRIPT_SYSTEM = (
    "You are a professional YouTube scriptwriter who creates engaging, viral-worthy "
    "scripts. You understand pacing, hooks, and how to keep viewers watching."
)
SCRIPT_MAX_TOKENS = 3000
THUMBNAIL_CONTEXT_CHARS = 300


class _Choice:
    """Name parsing with an explicit default arm, mixed into the variant enums."""

    @classmethod
    def default(cls) -> Any:
        raise NotImplementedError

    @classmethod
    def parse(cls, name: str | None) -> Any:
        """Resolve a variant by name; None selects the default.

        Raises:
            ValueError: If the name is not a known variant
        """
        if name is None:
            return cls.default()
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown {cls.__name__} '{name}'. Choose from: {valid}") from None

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


class ScriptLength(_Choice, str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def default(cls) -> ScriptLength:
        return cls.MEDIUM


class ScriptStyle(_Choice, str, Enum):
    EDUCATIONAL = "educational"
    ENTERTAINING = "entertaining"
    STORYTELLING = "storytelling"
    TUTORIAL = "tutorial"
    MOTIVATIONAL = "motivational"

    @classmethod
    def default(cls) -> ScriptStyle:
        return cls.EDUCATIONAL


class ThumbnailStyle(_Choice, str, Enum):
    YOUTUBE = "youtube"
    MINIMAL = "minimal"
    DRAMATIC = "dramatic"
    COLORFUL = "colorful"
    PROFESSIONAL = "professional"

    @classmethod
    def default(cls) -> ThumbnailStyle:
        return cls.YOUTUBE


_DESCRIPTIONS: dict[Enum, str] = {
    ScriptLength.SHORT: "1-2 minutes (about 150-300 words)",
    ScriptLength.MEDIUM: "5-7 minutes (about 750-1000 words)",
    ScriptLength.LONG: "10-15 minutes (about 1500-2000 words)",
    ScriptStyle.EDUCATIONAL: "Clear, informative, and structured with facts and explanations",
    ScriptStyle.ENTERTAINING: "Fun, engaging, with humor and personality",
    ScriptStyle.STORYTELLING: "Narrative-driven with a beginning, middle, and end",
    ScriptStyle.TUTORIAL: "Step-by-step instructions that are easy to follow",
    ScriptStyle.MOTIVATIONAL: "Inspiring and energetic with powerful messages",
    ThumbnailStyle.YOUTUBE: (
        "bold, eye-catching YouTube thumbnail with vibrant colors, dramatic lighting, "
        "and text-friendly composition"
    ),
    ThumbnailStyle.MINIMAL: "clean, minimal, modern thumbnail with simple shapes and muted colors",
    ThumbnailStyle.DRAMATIC: (
        "cinematic, dramatic thumbnail with high contrast, moody lighting, and intense atmosphere"
    ),
    ThumbnailStyle.COLORFUL: (
        "bright, fun, colorful thumbnail with playful elements and energetic vibe"
    ),
    ThumbnailStyle.PROFESSIONAL: (
        "professional, corporate-style thumbnail with clean design and trustworthy appearance"
    ),
}


def generate_script(
    client: Any,
    template_manager: Any,
    topic: str,
    length: ScriptLength = ScriptLength.MEDIUM,
    style: ScriptStyle = ScriptStyle.EDUCATIONAL,
    target_audience: str | None = None,
    model: str | None = None,
) -> str:
    """Write a complete video script for a topic.

    Args:
        client: LLMClient instance
        template_manager: PromptTemplateManager instance
        topic: What the video is about
        length: Target script length
        style: Delivery style
        target_audience: Optional audience description
        model: Optional model override for this call

    Returns:
        Script text

    Raises:
        ValueError: If topic is empty
        LLMError: If the LLM request fails
    """
    if not topic or not topic.strip():
        raise ValueError("Topic is required")

    prompt = template_manager.render(
        "script.txt",
        {
            "TOPIC": topic.strip(),
            "LENGTH": length.description,
            "STYLE": style.description,
            "TARGET_AUDIENCE": target_audience,
        },
    )

    logger.debug("Generating %s %s script for %r", length.value, style.value, topic)
    return client.complete(
        prompt,
        system=SCRIPT_SYSTEM,
        max_tokens=SCRIPT_MAX_TOKENS,
        model=model,
    )


def generate_thumbnail(
    client: Any,
    template_manager: Any,
    title: str | None = None,
    topic: str | None = None,
    summary: str | None = None,
    style: ThumbnailStyle = ThumbnailStyle.YOUTUBE,
) -> dict[str, str | None]:
    """Generate a text-free thumbnail image.

    Args:
        client: LLMClient instance
        template_manager: PromptTemplateManager instance
        title: Video title
        topic: Video topic, used when no title is given
        summary: Optional transcript summary for context
        style: Visual style

    Returns:
        Dict with "url" and "revised_prompt"

    Raises:
        ValueError: If neither title nor topic is given
        ContentPolicyError: If the image provider rejects the prompt
        LLMError: If the request fails
    """
    subject = title or topic
    if not subject:
        raise ValueError("Video title or topic is required")

    prompt = template_manager.render(
        "thumbnail.txt",
        {
            "STYLE": style.description,
            "TOPIC": subject,
            "CONTEXT": summary[:THUMBNAIL_CONTEXT_CHARS] if summary else None,
        },
    )

    logger.debug("Generating %s thumbnail for %r", style.value, subject)
    return client.generate_image(prompt)
