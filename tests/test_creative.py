"""Tests for vidcoach.llm.creative module."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from vidcoach.exceptions import ContentPolicyError
from vidcoach.llm.creative import (
    ScriptLength,
    ScriptStyle,
    ThumbnailStyle,
    generate_script,
    generate_thumbnail,
)


class TestVariants:
    def test_defaults(self) -> None:
        assert ScriptLength.parse(None) is ScriptLength.MEDIUM
        assert ScriptStyle.parse(None) is ScriptStyle.EDUCATIONAL
        assert ThumbnailStyle.parse(None) is ThumbnailStyle.YOUTUBE

    def test_parse_by_name(self) -> None:
        assert ScriptLength.parse("LONG") is ScriptLength.LONG
        assert ScriptStyle.parse("tutorial") is ScriptStyle.TUTORIAL
        assert ThumbnailStyle.parse("dramatic") is ThumbnailStyle.DRAMATIC

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="epic"):
            ScriptLength.parse("epic")
        with pytest.raises(ValueError, match="vaporwave"):
            ThumbnailStyle.parse("vaporwave")

    def test_every_variant_has_description(self) -> None:
        for enum in (ScriptLength, ScriptStyle, ThumbnailStyle):
            for member in enum:
                assert member.description


class TestGenerateScript:
    def test_builds_prompt(self, template_manager) -> None:
        client = MagicMock()
        client.complete.return_value = "HOOK\nDid you know..."

        text = generate_script(
            client,
            template_manager,
            "  home espresso on a budget ",
            length=ScriptLength.SHORT,
            style=ScriptStyle.ENTERTAINING,
            target_audience="college students",
            model="gpt-4o",
        )

        assert text == "HOOK\nDid you know..."
        prompt = client.complete.call_args.args[0]
        kwargs = client.complete.call_args.kwargs
        assert '"home espresso on a budget"' in prompt
        assert ScriptLength.SHORT.description in prompt
        assert ScriptStyle.ENTERTAINING.description in prompt
        assert "TARGET AUDIENCE: college students" in prompt
        assert kwargs["max_tokens"] == 3000
        assert kwargs["model"] == "gpt-4o"
        assert "scriptwriter" in kwargs["system"]

    def test_defaults_without_audience(self, template_manager) -> None:
        client = MagicMock()
        client.complete.return_value = "script"

        generate_script(client, template_manager, "Houseplants")

        prompt = client.complete.call_args.args[0]
        assert ScriptLength.MEDIUM.description in prompt
        assert ScriptStyle.EDUCATIONAL.description in prompt
        assert "TARGET AUDIENCE" not in prompt

    def test_empty_topic_raises(self, template_manager) -> None:
        client = MagicMock()
        with pytest.raises(ValueError):
            generate_script(client, template_manager, "   ")
        client.complete.assert_not_called()


class TestGenerateThumbnail:
    def test_uses_title_and_style(self, template_manager) -> None:
        client = MagicMock()
        client.generate_image.return_value = {"url": "https://img/1.png", "revised_prompt": None}

        image = generate_thumbnail(
            client, template_manager, title="I Quit Sugar for 30 Days",
            style=ThumbnailStyle.MINIMAL,
        )

        assert image["url"] == "https://img/1.png"
        prompt = client.generate_image.call_args.args[0]
        assert "I Quit Sugar for 30 Days" in prompt
        assert ThumbnailStyle.MINIMAL.description in prompt
        assert "Context:" not in prompt

    def test_falls_back_to_topic(self, template_manager) -> None:
        client = MagicMock()
        generate_thumbnail(client, template_manager, topic="Budget travel in Japan")
        assert "Budget travel in Japan" in client.generate_image.call_args.args[0]

    def test_summary_is_truncated(self, template_manager) -> None:
        client = MagicMock()
        summary = "x" * 300 + "y" * 50

        generate_thumbnail(client, template_manager, title="T", summary=summary)

        prompt = client.generate_image.call_args.args[0]
        assert "Context: " + "x" * 300 in prompt
        assert "y" not in prompt.split("Context: ")[1].split("\n")[0]

    def test_requires_subject(self, template_manager) -> None:
        with pytest.raises(ValueError):
            generate_thumbnail(MagicMock(), template_manager)

    def test_content_policy_propagates(self, template_manager) -> None:
        client = MagicMock()
        client.generate_image.side_effect = ContentPolicyError("rejected")

        with pytest.raises(ContentPolicyError):
            generate_thumbnail(client, template_manager, title="Anything")
