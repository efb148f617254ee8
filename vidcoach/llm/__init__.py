"""
vidcoach.llm - LLM client, prompt templates, and analysis passes.

The analysis suites (content report and competitor breakdown) are fixed
tables of independent passes; the creative tools write scripts and
generate thumbnails on demand.
"""

from __future__ import annotations
