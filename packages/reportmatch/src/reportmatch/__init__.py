"""reportmatch - Filename matching of uploaded reports to pending documents."""

from reportmatch.config import MatchConfig
from reportmatch.matcher import (
    confidence_band,
    find_match_candidates,
    preview_matches,
    resolve_assignments,
    suggest_documents,
    summarize_previews,
)
from reportmatch.normalize import extract_mapping_key, normalize, normalize_group_key
from reportmatch.pairing import auto_map_reports, group_documents, pair_reports
from reportmatch.reports import classify_report_text
from reportmatch.scoring import levenshtein_distance, similarity
from reportmatch.types import (
    AutoMapResult,
    AutoMapping,
    CandidateDocument,
    MatchCandidate,
    MatchPreview,
    PreviewStats,
    ReportClassification,
    ReportPairing,
)

__all__ = [
    "AutoMapResult",
    "AutoMapping",
    "CandidateDocument",
    "MatchCandidate",
    "MatchConfig",
    "MatchPreview",
    "PreviewStats",
    "ReportClassification",
    "ReportPairing",
    "auto_map_reports",
    "classify_report_text",
    "confidence_band",
    "extract_mapping_key",
    "find_match_candidates",
    "group_documents",
    "levenshtein_distance",
    "normalize",
    "normalize_group_key",
    "pair_reports",
    "preview_matches",
    "resolve_assignments",
    "similarity",
    "suggest_documents",
    "summarize_previews",
]
