"""
vidcoach.llm.client - LLM backend abstraction using litellm.

Provides a unified interface to chat-completion and image-generation
providers. Calls are issued exactly once; callers decide how to recover.
"""

from __future__ import annotations

import threading
from typing import Any

from vidcoach.exceptions import ContentPolicyError, LLMError, LLMResponseError


class LLMClient:
    """Thread-safe LLM client wrapper with token accounting."""

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        timeout: int = 120,
        api_base: str | None = None,
        image_model: str = "dall-e-3",
    ) -> None:
        self.model = model
        self.timeout = timeout
        self.api_base = api_base
        self.image_model = image_model
        self._lock = threading.Lock()
        self._token_usage = {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0}

    def _import_litellm(self) -> Any:
        try:
            import litellm
        except ImportError as e:
            raise LLMError("litellm not installed. Install with: pip install litellm") from e

        litellm.telemetry = False
        return litellm

    def complete(
        self,
        prompt: str,
        system: str | None = None,
        max_tokens: int = 500,
        temperature: float = 0.7,
        model: str | None = None,
    ) -> str:
        """Send a role-tagged prompt to the LLM and return the completion.

        Args:
            prompt: The user prompt
            system: Optional system instruction
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature
            model: Override the client's default model for this call

        Returns:
            LLM response text

        Raises:
            LLMResponseError: If the response has no usable content
            LLMError: If the request fails
        """
        litellm = self._import_litellm()

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs: dict[str, Any] = {
            "model": model or self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "timeout": self.timeout,
        }
        if self.api_base:
            kwargs["api_base"] = self.api_base

        try:
            response = litellm.completion(**kwargs)
        except Exception as e:
            raise LLMError(f"LLM request failed: {e}") from e

        usage = getattr(response, "usage", None)
        if usage:
            with self._lock:
                self._token_usage["prompt_tokens"] += getattr(usage, "prompt_tokens", 0) or 0
                self._token_usage["completion_tokens"] += (
                    getattr(usage, "completion_tokens", 0) or 0
                )
                self._token_usage["total_tokens"] += getattr(usage, "total_tokens", 0) or 0

        choices = getattr(response, "choices", None)
        if not choices:
            raise LLMResponseError("Empty response from LLM")

        message = getattr(choices[0], "message", None)
        if message is None:
            raise LLMResponseError("No message in LLM response")

        content = getattr(message, "content", None)
        if content is None:
            raise LLMResponseError("No content in LLM message")

        return content

    def generate_image(
        self,
        prompt: str,
        size: str = "1792x1024",
        quality: str = "standard",
    ) -> dict[str, str | None]:
        """Generate a single image and return its URL and the provider's revised prompt.

        Raises:
            ContentPolicyError: If the provider's safety filters reject the prompt
            LLMResponseError: If the response contains no image
            LLMError: If the request fails for any other reason
        """
        litellm = self._import_litellm()

        try:
            response = litellm.image_generation(
                model=self.image_model,
                prompt=prompt,
                n=1,
                size=size,
                quality=quality,
                timeout=self.timeout,
            )
        except litellm.ContentPolicyViolationError as e:
            raise ContentPolicyError(str(e)) from e
        except Exception as e:
            if getattr(e, "code", None) == "content_policy_violation":
                raise ContentPolicyError(str(e)) from e
            raise LLMError(f"Image generation failed: {e}") from e

        data = getattr(response, "data", None)
        if not data:
            raise LLMResponseError("No image in response")

        image = data[0]
        url = getattr(image, "url", None)
        if url is None and isinstance(image, dict):
            url = image.get("url")
        if not url:
            raise LLMResponseError("Image response has no URL")

        revised = getattr(image, "revised_prompt", None)
        if revised is None and isinstance(image, dict):
            revised = image.get("revised_prompt")

        return {"url": url, "revised_prompt": revised}

    def get_token_usage(self) -> dict[str, int]:
        """Get cumulative token usage."""
        with self._lock:
            return self._token_usage.copy()

    def reset_token_usage(self) -> None:
        """Reset token usage counters."""
        with self._lock:
            self._token_usage = {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0}


def create_client_from_config(config: Any) -> LLMClient:
    """Create LLM client from VidcoachConfig.

    Args:
        config: VidcoachConfig instance

    Returns:
        Configured LLMClient
    """
    return LLMClient(
        model=config.llm_model,
        timeout=config.llm_timeout,
        image_model=config.image_model,
    )
