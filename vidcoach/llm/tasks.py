"""
vidcoach.llm.tasks - Analysis task table.

Each AnalyzerTask describes one independent facet of the content report:
the role instruction, the prompt template and its variables, the output
budget, and the fixed text substituted when the LLM call fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from vidcoach.transcript import Transcript
from vidcoach.utils import round_half_up

VIDEO_SCORE_KEY = "video_score"

HOOK_WORD_LIMIT = 100
SPOKEN_WORDS_PER_MINUTE = 150


@dataclass(frozen=True)
class AnalysisContext:
    """Auxiliary inputs computed before the fan-out."""

    pace_note: str = ""


@dataclass(frozen=True)
class PromptRequest:
    """A role-tagged request ready to send to the LLM client."""

    system: str
    prompt: str
    max_tokens: int


@dataclass(frozen=True)
class AnalyzerTask:
    """One configured analysis pass over a transcript."""

    key: str
    system: str
    template: str
    fallback: str
    max_tokens: int = 500
    variables: Callable[[Transcript, AnalysisContext], dict[str, Any]] | None = None

    def build_request(
        self,
        transcript: Transcript,
        context: AnalysisContext,
        templates: Any,
    ) -> PromptRequest:
        """Render this task's prompt for a transcript.

        Args:
            transcript: Transcript to analyze
            context: Auxiliary analysis context
            templates: PromptTemplateManager instance

        Returns:
            PromptRequest for the LLM client
        """
        build = self.variables or _full_text
        prompt = templates.render(self.template, build(transcript, context))
        return PromptRequest(system=self.system, prompt=prompt, max_tokens=self.max_tokens)


def _full_text(transcript: Transcript, context: AnalysisContext) -> dict[str, Any]:
    return {"TRANSCRIPT": transcript.text}


def _excerpt(limit: int) -> Callable[[Transcript, AnalysisContext], dict[str, Any]]:
    def build(transcript: Transcript, context: AnalysisContext) -> dict[str, Any]:
        return {"TRANSCRIPT": transcript.text[:limit]}

    return build


def _hook(transcript: Transcript, context: AnalysisContext) -> dict[str, Any]:
    return {
        "OPENING": transcript.first_words(HOOK_WORD_LIMIT),
        "WORD_LIMIT": HOOK_WORD_LIMIT,
    }


def _pacing(transcript: Transcript, context: AnalysisContext) -> dict[str, Any]:
    return {"TRANSCRIPT": transcript.text, "WORD_COUNT": transcript.word_count}


def _platform(transcript: Transcript, context: AnalysisContext) -> dict[str, Any]:
    return {
        "TRANSCRIPT": transcript.text,
        "ESTIMATED_MINUTES": round_half_up(transcript.word_count / SPOKEN_WORDS_PER_MINUTE),
    }


def _audio(transcript: Transcript, context: AnalysisContext) -> dict[str, Any]:
    return {"TRANSCRIPT": transcript.text, "PACE_NOTE": context.pace_note}


ANALYSIS_TASKS: tuple[AnalyzerTask, ...] = (
    AnalyzerTask(
        key="tips",
        system=(
            "You are an expert video coach and content strategist. Analyze video "
            "transcriptions and provide specific, actionable tips to improve engagement, "
            "retention, and viral potential."
        ),
        template="tips.txt",
        fallback="Tips could not be generated at this time.",
    ),
    AnalyzerTask(
        key="trending_and_ideas",
        system=(
            "You are a social media trends expert and content strategist. Based on the "
            "user's content style, suggest trending topics and personalized video ideas."
        ),
        template="trending_and_ideas.txt",
        fallback="Trending topics could not be generated at this time.",
        max_tokens=600,
    ),
    AnalyzerTask(
        key="title_and_description",
        system=(
            "You are a YouTube SEO expert. Generate compelling, click-worthy titles and "
            "descriptions that rank well in search."
        ),
        template="title_and_description.txt",
        fallback="Title and description could not be generated at this time.",
        max_tokens=700,
    ),
    AnalyzerTask(
        key="hashtags",
        system=(
            "You are a social media hashtag expert. Generate relevant, trending hashtags "
            "that will maximize reach and engagement. Format each hashtag on its own line "
            "within each section for easy parsing."
        ),
        template="hashtags.txt",
        fallback="Hashtags could not be generated at this time.",
        max_tokens=400,
    ),
    AnalyzerTask(
        key=VIDEO_SCORE_KEY,
        system=(
            "You are a video content analyst. Score videos objectively and provide "
            "actionable feedback. Always return scores as numbers."
        ),
        template="video_score.txt",
        fallback="Video score could not be generated at this time.",
    ),
    AnalyzerTask(
        key="hook_analysis",
        system=(
            "You are a viral video hook expert. Analyze the opening of videos and provide "
            "specific feedback on how to capture attention in the first 3 seconds."
        ),
        template="hook_analysis.txt",
        fallback="Hook analysis could not be generated at this time.",
        variables=_hook,
    ),
    AnalyzerTask(
        key="thumbnail_text",
        system=(
            "You are a YouTube thumbnail expert who understands what text makes people "
            "click. Thumbnail text should be SHORT (1-4 words max), emotionally triggering, "
            "and create curiosity or urgency."
        ),
        template="thumbnail_text.txt",
        fallback="Thumbnail text suggestions could not be generated at this time.",
        max_tokens=300,
    ),
    AnalyzerTask(
        key="pacing_analysis",
        system=(
            "You are a video pacing expert who understands audience retention. Analyze "
            "transcripts to identify where viewers might lose interest and how to maintain "
            "engagement throughout."
        ),
        template="pacing_analysis.txt",
        fallback="Pacing analysis could not be generated at this time.",
        max_tokens=400,
        variables=_pacing,
    ),
    AnalyzerTask(
        key="cta_recommendations",
        system=(
            "You are a conversion expert who knows how to get viewers to take action. "
            "Analyze videos and suggest the perfect calls-to-action based on the content "
            "and audience."
        ),
        template="cta_recommendations.txt",
        fallback="CTA recommendations could not be generated at this time.",
        max_tokens=400,
    ),
    AnalyzerTask(
        key="platform_feedback",
        system=(
            "You are a multi-platform social media strategist who understands the unique "
            "requirements of YouTube, TikTok, Instagram Reels, and LinkedIn. Help creators "
            "optimize and repurpose content."
        ),
        template="platform_feedback.txt",
        fallback="Platform feedback could not be generated at this time.",
        variables=_platform,
    ),
    AnalyzerTask(
        key="audio_notes",
        system=(
            "You are an audio/speech coach who helps creators improve their vocal delivery. "
            "Analyze transcripts for speech patterns, filler words, and delivery issues."
        ),
        template="audio_notes.txt",
        fallback="Audio notes could not be generated at this time.",
        max_tokens=400,
        variables=_audio,
    ),
    AnalyzerTask(
        key="quick_summary",
        system="You are a video content summarizer. Create very brief summaries.",
        template="quick_summary.txt",
        fallback="Video analysis",
        max_tokens=50,
        variables=_excerpt(500),
    ),
)


COMPETITOR_TASKS: tuple[AnalyzerTask, ...] = (
    AnalyzerTask(
        key="success_analysis",
        system=(
            "You are a viral video analyst who studies successful content to understand "
            "what makes it work. Be specific and actionable."
        ),
        template="competitor_success.txt",
        fallback="Success analysis could not be generated at this time.",
        max_tokens=600,
    ),
    AnalyzerTask(
        key="structure_analysis",
        system="You are a content strategist who reverse-engineers successful video structures.",
        template="competitor_structure.txt",
        fallback="Structure analysis could not be generated at this time.",
        max_tokens=600,
    ),
    AnalyzerTask(
        key="tactics_analysis",
        system=(
            "You are a content coach helping creators learn from successful competitors. "
            "Focus on actionable tactics they can apply to their own videos."
        ),
        template="competitor_tactics.txt",
        fallback="Tactics analysis could not be generated at this time.",
        max_tokens=600,
    ),
    AnalyzerTask(
        key="seo_analysis",
        system="You are a YouTube SEO expert who can identify ranking factors from video content.",
        template="competitor_seo.txt",
        fallback="SEO analysis could not be generated at this time.",
    ),
    AnalyzerTask(
        key="competitor_summary",
        system="You are a video analyst. Provide brief, punchy summaries.",
        template="competitor_summary.txt",
        fallback="Competitor video analysis",
        max_tokens=100,
        variables=_excerpt(1000),
    ),
)
