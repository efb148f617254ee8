"""
vidcoach.analyze - Transcript analysis.

Speaking pace from segment timestamps, overall score extraction, and the
parallel dispatcher that runs every LLM analysis pass over a transcript.
"""

from __future__ import annotations
