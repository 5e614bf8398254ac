"""Candidate ranking and batch match previews."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from reportmatch.config import MatchConfig, Thresholds
from reportmatch.normalize import normalize
from reportmatch.scoring import similarity
from reportmatch.types import (
    CandidateDocument,
    ConfidenceBand,
    MatchCandidate,
    MatchPreview,
    MatchType,
    PreviewStats,
)

log = structlog.get_logger()

DEFAULT_MIN_CONFIDENCE = Thresholds.min_confidence

CandidateInput = CandidateDocument | Mapping[str, Any]


def as_candidate(doc: CandidateInput) -> CandidateDocument:
    """Accept either a CandidateDocument or a loose row mapping."""
    if isinstance(doc, CandidateDocument):
        return doc
    return CandidateDocument.from_record(doc)


def candidate_key(doc: CandidateDocument) -> str:
    """The document's comparison key: precomputed if set, else derived."""
    return doc.normalized_filename or normalize(doc.file_name)


def _match_type(confidence: int) -> MatchType:
    if confidence == 100:
        return "exact"
    if confidence > 0:
        return "fuzzy"
    return "none"


def find_match_candidates(
    query_filename: str,
    candidates: Iterable[CandidateInput],
    min_confidence: int = DEFAULT_MIN_CONFIDENCE,
) -> list[MatchCandidate]:
    """Score every candidate against a report filename, best first.

    Candidates scoring below min_confidence are dropped. Ties keep their
    input order.
    """
    query_key = normalize(query_filename)
    results: list[MatchCandidate] = []
    scanned = 0

    for raw in candidates:
        scanned += 1
        doc = as_candidate(raw)
        doc_key = candidate_key(doc)
        confidence = similarity(query_key, doc_key)
        if confidence < min_confidence:
            continue
        results.append(
            MatchCandidate(
                id=doc.id,
                file_name=doc.file_name,
                normalized_filename=doc_key,
                confidence=confidence,
                match_type=_match_type(confidence),
            )
        )

    # list.sort is stable, including with reverse=True
    results.sort(key=lambda c: c.confidence, reverse=True)

    log.debug(
        "rank_done",
        query=query_filename,
        query_key=query_key,
        scanned=scanned,
        kept=len(results),
        best=results[0].confidence if results else None,
    )
    return results


def preview_matches(
    report_filenames: Iterable[str],
    candidates: Iterable[CandidateInput],
    config: MatchConfig | None = None,
) -> list[MatchPreview]:
    """Propose a document for each report filename.

    Every report is ranked against the full pool; a document picked for one
    report stays eligible for the next. Callers wanting one-to-one
    assignment filter the pool themselves.
    """
    if config is None:
        config = MatchConfig()

    pool = [as_candidate(c) for c in candidates]
    previews = [_preview_one(name, pool, config) for name in report_filenames]

    stats = summarize_previews(previews)
    log.debug(
        "preview_done",
        reports=stats.total,
        candidates=len(pool),
        exact=stats.exact,
        partial=stats.partial,
        none=stats.none,
    )
    return previews


def _preview_one(
    report_name: str,
    pool: list[CandidateDocument],
    config: MatchConfig,
) -> MatchPreview:
    t = config.thresholds
    limits = config.suggestions

    normalized_key = normalize(report_name)
    ranked = find_match_candidates(report_name, pool, t.preview_min_confidence)

    exact = next((c for c in ranked if c.match_type == "exact"), None)
    if exact is not None:
        return MatchPreview(
            report_name=report_name,
            normalized_key=normalized_key,
            matched_document=exact,
            suggestions=[c for c in ranked if c.id != exact.id][: limits.matched],
            status="exact",
        )

    partial = next((c for c in ranked if c.confidence >= t.partial), None)
    if partial is not None:
        return MatchPreview(
            report_name=report_name,
            normalized_key=normalized_key,
            matched_document=partial,
            suggestions=[c for c in ranked if c.id != partial.id][: limits.matched],
            status="partial",
        )

    return MatchPreview(
        report_name=report_name,
        normalized_key=normalized_key,
        matched_document=None,
        suggestions=ranked[: limits.unmatched],
        status="none",
    )


def suggest_documents(
    report_filename: str,
    candidates: Iterable[CandidateInput],
    max_suggestions: int | None = None,
    min_confidence: int | None = None,
    config: MatchConfig | None = None,
) -> list[MatchCandidate]:
    """Looser ranking used when an operator assigns a report by hand."""
    if config is None:
        config = MatchConfig()
    if max_suggestions is None:
        max_suggestions = config.suggestions.manual_max
    if min_confidence is None:
        min_confidence = config.suggestions.manual_min_confidence

    ranked = find_match_candidates(report_filename, candidates, min_confidence)
    return ranked[:max_suggestions]


def summarize_previews(previews: Iterable[MatchPreview]) -> PreviewStats:
    stats = PreviewStats()
    for p in previews:
        stats.total += 1
        if p.status == "exact":
            stats.exact += 1
        elif p.status == "partial":
            stats.partial += 1
        else:
            stats.none += 1
    return stats


def resolve_assignments(
    previews: Iterable[MatchPreview],
    manual_assignments: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Map report name -> document id for the reports that will be processed.

    A manual assignment overrides the automatic pick. Reports with neither
    are left out.
    """
    manual_assignments = manual_assignments or {}
    assignments: dict[str, str] = {}
    for p in previews:
        if p.report_name in manual_assignments:
            assignments[p.report_name] = manual_assignments[p.report_name]
        elif p.matched_document is not None:
            assignments[p.report_name] = p.matched_document.id
    return assignments


def confidence_band(confidence: int, config: MatchConfig | None = None) -> ConfidenceBand:
    if config is None:
        config = MatchConfig()
    if confidence >= config.bands.high:
        return "high"
    if confidence >= config.bands.medium:
        return "medium"
    return "low"
