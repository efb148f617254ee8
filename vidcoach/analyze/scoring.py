"""
vidcoach.analyze.scoring - Overall score extraction from the score report.
"""

from __future__ import annotations

import re

# The "OVERALL SCORE" label (any case), then:
#   - an optional parenthetical note starting with a letter: "Overall score (out of 100): 87"
#   - any run of whitespace, ':', '*', '=', '-' or brackets: "**OVERALL SCORE:** 87",
#     "OVERALL SCORE = 87", "OVERALL SCORE: [78/100]", "OVERALL SCORE (87/100)"
#   - the integer, taken as written
OVERALL_SCORE_PATTERN = re.compile(
    r"OVERALL\s+SCORE(?:\s*\([A-Za-z][^)]*\))?[\s:*=\-\[\]()]*(\d+)",
    re.IGNORECASE,
)


def extract_overall_score(report_text: str | None) -> int | None:
    """Extract the overall score from a score report.

    The value is returned as written; it is not clamped to 0-100.

    Args:
        report_text: Text produced by the video score pass

    Returns:
        The first overall score found, or None if the report has none
    """
    if not report_text:
        return None
    match = OVERALL_SCORE_PATTERN.search(report_text)
    return int(match.group(1)) if match else None
