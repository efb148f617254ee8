"""
vidcoach.llm.templates - Prompt templates.

Prompts live as Jinja2 templates in the packaged prompts/ directory, one per
analysis pass or creative tool. Variables are UPPER_CASE and must all be
supplied: a missing variable fails the render instead of silently producing
an incomplete prompt.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound, meta

DEFAULT_PROMPTS_DIR = Path(__file__).parent.parent / "prompts"


class PromptTemplateManager:
    """Loads, caches and renders prompt templates. Safe to share across threads."""

    def __init__(self, prompts_dir: Path = DEFAULT_PROMPTS_DIR) -> None:
        self.prompts_dir = prompts_dir
        self.env = Environment(
            loader=FileSystemLoader(str(prompts_dir)),
            undefined=StrictUndefined,
            autoescape=False,
        )
        self._templates: dict[str, Template] = {}
        self._lock = threading.Lock()

    def get_template(self, name: str) -> Template:
        """Return the compiled template `name` (e.g. "video_score.txt").

        Raises:
            FileNotFoundError: If there is no such template
        """
        with self._lock:
            template = self._templates.get(name)
            if template is None:
                try:
                    template = self.env.get_template(name)
                except TemplateNotFound as e:
                    raise FileNotFoundError(
                        f"Template not found: {self.prompts_dir / name}"
                    ) from e
                self._templates[name] = template
            return template

    def render(self, template_name: str, variables: dict[str, Any]) -> str:
        """Render a prompt.

        Raises:
            FileNotFoundError: If there is no such template
            jinja2.UndefinedError: If a variable the template uses is missing
        """
        return self.get_template(template_name).render(**variables)

    def variables(self, template_name: str) -> set[str]:
        """Names of the variables a template expects."""
        source, _, _ = self.env.loader.get_source(self.env, template_name)
        return meta.find_undeclared_variables(self.env.parse(source))

    def list_templates(self) -> list[str]:
        if not self.prompts_dir.exists():
            return []
        return sorted(f.name for f in self.prompts_dir.glob("*.txt"))
