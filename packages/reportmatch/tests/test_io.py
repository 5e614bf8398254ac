"""Tests for the io module (CSV/JSONL/TXT reading and writing)."""

from pathlib import Path
import json

import pytest

from reportmatch.io import read_candidates, read_report_names, write_previews
from reportmatch.matcher import preview_matches
from reportmatch.types import CandidateDocument


class TestReadCandidates:
    """Tests for reading pending documents."""

    def test_read_csv(self, tmp_path: Path):
        csv_file = tmp_path / "docs.csv"
        csv_file.write_text(
            "id,file_name,normalized_filename,status\n"
            "1,Thesis.pdf,thesis,pending\n"
            "2,Essay (1).docx,,in_progress\n"
        )

        result = read_candidates(csv_file)

        assert result == [
            CandidateDocument("1", "Thesis.pdf", "thesis", "pending"),
            CandidateDocument("2", "Essay (1).docx", None, "in_progress"),
        ]

    def test_read_csv_minimal_columns(self, tmp_path: Path):
        csv_file = tmp_path / "docs.csv"
        csv_file.write_text("id,file_name\n10,Lab.pdf\n")

        result = read_candidates(csv_file)

        assert result == [CandidateDocument("10", "Lab.pdf", None, "")]

    def test_read_csv_skips_empty_names_and_strips(self, tmp_path: Path):
        csv_file = tmp_path / "docs.csv"
        csv_file.write_text("id,file_name\n1,  Thesis.pdf  \n2,\n3,Essay.pdf\n")

        result = read_candidates(csv_file)

        assert [(d.id, d.file_name) for d in result] == [("1", "Thesis.pdf"), ("3", "Essay.pdf")]

    def test_read_csv_missing_id_uses_row_index(self, tmp_path: Path):
        csv_file = tmp_path / "docs.csv"
        csv_file.write_text("file_name\nA.pdf\nB.pdf\n")

        result = read_candidates(csv_file)

        assert [d.id for d in result] == ["0", "1"]

    def test_read_csv_with_excel_bom(self, tmp_path: Path):
        csv_file = tmp_path / "docs.csv"
        csv_file.write_text("\ufeffid,file_name\n1,Thesis.pdf\n", encoding="utf-8")

        result = read_candidates(csv_file)

        assert result == [CandidateDocument("1", "Thesis.pdf", None, "")]

    def test_read_jsonl(self, tmp_path: Path):
        jsonl_file = tmp_path / "docs.jsonl"
        jsonl_file.write_text(
            '{"id": "a1", "file_name": "Thesis.pdf", "normalized_filename": null}\n'
            '\n'
            '{"id": 7, "fileName": "Essay.pdf", "status": "pending"}\n'
        )

        result = read_candidates(jsonl_file)

        assert result == [
            CandidateDocument("a1", "Thesis.pdf", None, ""),
            CandidateDocument("7", "Essay.pdf", None, "pending"),
        ]

    def test_read_jsonl_invalid_line(self, tmp_path: Path):
        jsonl_file = tmp_path / "docs.jsonl"
        jsonl_file.write_text('{"id": "1", "file_name": "a.pdf"}\n{not json\n')

        with pytest.raises(ValueError, match=":2:"):
            read_candidates(jsonl_file)

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "docs.xml"
        path.write_text("<docs/>")

        with pytest.raises(ValueError, match="Unsupported"):
            read_candidates(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_candidates(tmp_path / "nope.csv")


class TestReadReportNames:
    """Tests for reading report filenames."""

    def test_read_txt(self, tmp_path: Path):
        txt_file = tmp_path / "reports.txt"
        txt_file.write_text("Thesis (1).pdf\n\n  Essay.pdf  \n")

        assert read_report_names(txt_file) == ["Thesis (1).pdf", "Essay.pdf"]

    def test_read_csv_column(self, tmp_path: Path):
        csv_file = tmp_path / "reports.csv"
        csv_file.write_text("file_name,size\nA.pdf,10\nB.pdf,20\n")

        assert read_report_names(csv_file) == ["A.pdf", "B.pdf"]

    def test_read_jsonl_custom_column(self, tmp_path: Path):
        jsonl_file = tmp_path / "reports.jsonl"
        jsonl_file.write_text('{"name": "A.pdf"}\n{"name": null}\n')

        assert read_report_names(jsonl_file, column="name") == ["A.pdf"]


class TestWritePreviews:
    """Tests for writing previews."""

    def _previews(self):
        docs = [
            CandidateDocument("1", "Thesis.pdf", "thesis"),
            CandidateDocument("2", "Thesis Draft.pdf"),
        ]
        return preview_matches(["thesis (1).pdf", "unrelated.pdf"], docs)

    def test_write_csv(self, tmp_path: Path):
        csv_file = tmp_path / "previews.csv"

        write_previews(self._previews(), csv_file)

        lines = csv_file.read_text().strip().splitlines()
        assert len(lines) == 3
        assert lines[0] == "report_name,normalized_key,status,matched_id,matched_file_name,confidence,suggestions"
        assert lines[1].startswith("thesis (1).pdf,thesis,exact,1,Thesis.pdf,100,")
        assert ",none,,," in lines[2]

    def test_write_jsonl(self, tmp_path: Path):
        jsonl_file = tmp_path / "previews.jsonl"

        write_previews(self._previews(), jsonl_file)

        records = [json.loads(line) for line in jsonl_file.read_text().splitlines()]
        assert records[0]["status"] == "exact"
        assert records[0]["matched_document"]["id"] == "1"
        assert records[0]["matched_document"]["match_type"] == "exact"
        assert records[1]["matched_document"] is None

    def test_write_unsupported_suffix(self, tmp_path: Path):
        with pytest.raises(ValueError):
            write_previews([], tmp_path / "out.parquet")
