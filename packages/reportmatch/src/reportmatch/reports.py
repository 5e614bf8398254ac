"""Classification of extracted report text.

Text extraction (OCR) happens elsewhere; this module only reads the text of a
report's summary page and decides which kind of report it is.
"""

from __future__ import annotations

import re

import structlog

from reportmatch.types import ReportClassification

log = structlog.get_logger()

SIMILARITY_INDICATORS = (
    "overall similarity",
    "match groups",
    "integrity overview",
)

AI_INDICATORS = (
    "detected as ai",
    "ai writing overview",
    "detection groups",
)

_SIMILARITY_PERCENT = re.compile(r"([0-9]{1,3})\s*%\s*overall similarity")
_AI_PERCENT = re.compile(r"([0-9]{1,3}|\*)\s*%\s*detected as ai")
_WHITESPACE = re.compile(r"\s+")


def classify_report_text(text: str) -> ReportClassification:
    """Decide whether text belongs to a similarity or an AI-writing report.

    Text carrying indicators of both kinds, or of neither, is "unknown". An
    AI report showing "*%" has no percentage.
    """
    s = _WHITESPACE.sub(" ", text.lower())

    is_similarity = any(ind in s for ind in SIMILARITY_INDICATORS)
    is_ai = any(ind in s for ind in AI_INDICATORS)

    if is_similarity and not is_ai:
        m = _SIMILARITY_PERCENT.search(s)
        result = ReportClassification("similarity", int(m.group(1)) if m else None)
    elif is_ai and not is_similarity:
        m = _AI_PERCENT.search(s)
        percentage = None
        if m and m.group(1) != "*":
            percentage = int(m.group(1))
        result = ReportClassification("ai", percentage)
    else:
        result = ReportClassification("unknown")

    log.debug(
        "report_classified",
        similarity_indicators=is_similarity,
        ai_indicators=is_ai,
        report_type=result.report_type,
        percentage=result.percentage,
    )
    return result
