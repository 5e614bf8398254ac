"""Tests for exact-key pairing."""

from reportmatch.pairing import auto_map_reports, group_documents, pair_reports
from reportmatch.types import CandidateDocument


def test_group_documents_by_key():
    docs = [
        CandidateDocument(id="1", file_name="Essay.docx"),
        CandidateDocument(id="2", file_name="essay (1).pdf"),
        CandidateDocument(id="3", file_name="[Guest] Notes.pdf"),
    ]
    groups = group_documents(docs)
    assert list(groups) == ["essay", "guest notes"]
    assert [d.id for d in groups["essay"]] == ["1", "2"]


def test_group_documents_trusts_precomputed_key():
    docs = [
        CandidateDocument(id="1", file_name="Essay.docx", normalized_filename="custom"),
        {"id": "2", "file_name": "Custom.pdf"},
    ]
    groups = group_documents(docs)
    assert [d.id for d in groups["custom"]] == ["1", "2"]


def test_pair_reports_outcomes():
    docs = [
        {"id": "1", "file_name": "TOKPD.pdf"},
        {"id": "2", "file_name": "Essay.docx"},
        {"id": "3", "file_name": "essay (1).pdf"},
    ]
    pairings = pair_reports(["TOKPD (11).pdf", "essay.pdf", "missing.pdf"], docs)

    assert [p.outcome for p in pairings] == ["mapped", "ambiguous", "unmatched"]
    assert [d.id for d in pairings[0].documents] == ["1"]
    assert [d.id for d in pairings[1].documents] == ["2", "3"]
    assert pairings[2].documents == []
    assert pairings[0].group_key == "tokpd"


def test_pair_reports_is_exact_only():
    pairings = pair_reports(["essays.pdf"], [{"id": "1", "file_name": "essay.pdf"}])
    assert pairings[0].outcome == "unmatched"


def test_pair_reports_empty_pool():
    pairings = pair_reports(["a.pdf"], [])
    assert pairings[0].outcome == "unmatched"


def test_auto_map_consumes_keys():
    docs = [
        {"id": "1", "file_name": "Essay 42.docx"},
        {"id": "2", "file_name": "Lab 7.pdf"},
    ]
    result = auto_map_reports(
        ["Essay 42 QWERTYU.pdf", "Essay 42 ASDFGHJ.pdf", "Unknown 9.pdf"],
        docs,
    )

    assert [(m.report_name, m.document.id, m.mapping_key) for m in result.mapped] == [
        ("Essay 42 QWERTYU.pdf", "1", "essay 42"),
    ]
    assert result.unmapped == ["Essay 42 ASDFGHJ.pdf", "Unknown 9.pdf"]
    assert (result.stats.total, result.stats.mapped, result.stats.unmapped) == (3, 1, 2)


def test_auto_map_later_document_wins_shared_key():
    docs = [
        CandidateDocument(id="1", file_name="Lab 7.pdf"),
        CandidateDocument(id="2", file_name="Lab 7.docx"),
    ]
    result = auto_map_reports(["Lab 7 ZXCVBNM.pdf"], docs)
    assert [m.document.id for m in result.mapped] == ["2"]


def test_auto_map_empty_pool():
    result = auto_map_reports(["a.pdf"], [])
    assert result.mapped == []
    assert result.unmapped == ["a.pdf"]
