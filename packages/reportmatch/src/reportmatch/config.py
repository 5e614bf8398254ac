"""Configuration for the reportmatch filename matching engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Thresholds:
    min_confidence: int = 60  # default cut-off for find_match_candidates
    preview_min_confidence: int = 50
    partial: int = 80


@dataclass
class SuggestionLimits:
    matched: int = 4  # alternatives kept next to a chosen document
    unmatched: int = 5
    manual_max: int = 5
    manual_min_confidence: int = 40


@dataclass
class ConfidenceBands:
    high: int = 90
    medium: int = 70


@dataclass
class MatchConfig:
    thresholds: Thresholds = field(default_factory=Thresholds)
    suggestions: SuggestionLimits = field(default_factory=SuggestionLimits)
    bands: ConfidenceBands = field(default_factory=ConfidenceBands)
