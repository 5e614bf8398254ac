"""Core types for the reportmatch filename matching engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

MatchType = Literal["exact", "fuzzy", "none"]
PreviewStatus = Literal["exact", "partial", "none"]
PairingOutcome = Literal["mapped", "ambiguous", "unmatched"]
ReportType = Literal["similarity", "ai", "unknown"]
ConfidenceBand = Literal["high", "medium", "low"]


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class CandidateDocument:
    """A pending document that an incoming report may belong to."""

    id: str
    file_name: str
    normalized_filename: str | None = None  # precomputed key, if the store has one
    status: str = ""  # carried through, never interpreted

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> CandidateDocument:
        """Build a document from a loose row mapping.

        Missing fields become empty. camelCase keys (``fileName``,
        ``normalizedFilename``) are accepted as aliases.
        """
        file_name = record.get("file_name")
        if file_name is None:
            file_name = record.get("fileName")
        normalized = record.get("normalized_filename")
        if normalized is None:
            normalized = record.get("normalizedFilename")
        return cls(
            id=_as_text(record.get("id")),
            file_name=_as_text(file_name),
            normalized_filename=None if normalized is None else str(normalized),
            status=_as_text(record.get("status")),
        )


@dataclass(frozen=True)
class MatchCandidate:
    id: str
    file_name: str
    normalized_filename: str
    confidence: int
    match_type: MatchType


@dataclass(frozen=True)
class MatchPreview:
    report_name: str
    normalized_key: str
    matched_document: MatchCandidate | None
    suggestions: list[MatchCandidate] = field(default_factory=list)
    status: PreviewStatus = "none"


@dataclass
class PreviewStats:
    """Status counts over a batch of previews."""

    total: int = 0
    exact: int = 0
    partial: int = 0
    none: int = 0


@dataclass(frozen=True)
class ReportPairing:
    report_name: str
    group_key: str
    outcome: PairingOutcome
    documents: list[CandidateDocument] = field(default_factory=list)


@dataclass(frozen=True)
class ReportClassification:
    report_type: ReportType
    percentage: int | None = None


@dataclass(frozen=True)
class AutoMapping:
    report_name: str
    document: CandidateDocument
    mapping_key: str


@dataclass
class AutoMapStats:
    total: int = 0
    mapped: int = 0
    unmapped: int = 0


@dataclass
class AutoMapResult:
    """Outcome of one-to-one auto-mapping over a batch of reports."""

    mapped: list[AutoMapping] = field(default_factory=list)
    unmapped: list[str] = field(default_factory=list)
    stats: AutoMapStats = field(default_factory=AutoMapStats)
