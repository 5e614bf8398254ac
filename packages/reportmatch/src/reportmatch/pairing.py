"""Key-based pairing of bulk-uploaded reports with pending documents."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from reportmatch.matcher import CandidateInput, as_candidate
from reportmatch.normalize import extract_mapping_key, normalize_group_key
from reportmatch.types import AutoMapping, AutoMapResult, CandidateDocument, ReportPairing

log = structlog.get_logger()


def group_documents(
    candidates: Iterable[CandidateInput],
) -> dict[str, list[CandidateDocument]]:
    """Group documents by grouping key, preserving first-seen order.

    A precomputed normalized_filename is trusted as the key.
    """
    groups: dict[str, list[CandidateDocument]] = {}
    for raw in candidates:
        doc = as_candidate(raw)
        key = doc.normalized_filename or normalize_group_key(doc.file_name)
        groups.setdefault(key, []).append(doc)
    return groups


def pair_reports(
    report_filenames: Iterable[str],
    candidates: Iterable[CandidateInput],
) -> list[ReportPairing]:
    """Pair each report with the single document sharing its grouping key.

    Reports whose key is shared by several documents come back "ambiguous"
    with all of them attached, so the caller can flag those documents for
    review.
    """
    groups = group_documents(candidates)
    log.debug("document_groups", count=len(groups))

    pairings: list[ReportPairing] = []
    for report_name in report_filenames:
        key = normalize_group_key(report_name)
        docs = groups.get(key, [])

        if not docs:
            outcome = "unmatched"
        elif len(docs) > 1:
            outcome = "ambiguous"
            log.debug("ambiguous_group_key", report=report_name, key=key, documents=len(docs))
        else:
            outcome = "mapped"

        pairings.append(
            ReportPairing(
                report_name=report_name,
                group_key=key,
                outcome=outcome,
                documents=list(docs),
            )
        )
    return pairings


def auto_map_reports(
    report_filenames: Iterable[str],
    candidates: Iterable[CandidateInput],
) -> AutoMapResult:
    """Map reports to documents one-to-one by mapping key.

    Documents are keyed by extract_mapping_key(file_name); when two share a
    key the later one wins. A key is consumed by the first report that
    matches it, so later reports with the same key stay unmapped.
    """
    by_key: dict[str, CandidateDocument] = {}
    for raw in candidates:
        doc = as_candidate(raw)
        by_key[extract_mapping_key(doc.file_name)] = doc

    result = AutoMapResult()
    for report_name in report_filenames:
        result.stats.total += 1
        key = extract_mapping_key(report_name)
        doc = by_key.pop(key, None)
        if doc is None:
            result.unmapped.append(report_name)
            result.stats.unmapped += 1
            continue
        result.mapped.append(AutoMapping(report_name=report_name, document=doc, mapping_key=key))
        result.stats.mapped += 1

    log.debug(
        "auto_map_done",
        reports=result.stats.total,
        mapped=result.stats.mapped,
        unmapped=result.stats.unmapped,
    )
    return result
