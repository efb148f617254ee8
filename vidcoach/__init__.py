"""
vidcoach - AI-assisted video content coaching.

Takes a speech-to-text transcript and produces a multi-facet content report
by fanning out independent LLM analysis passes, then ranks the overall score
against a rolling benchmark of previously analyzed videos.
"""

__version__ = "0.1.0"
