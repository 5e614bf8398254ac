"""CSV/JSONL input and output for filename matching."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path

from reportmatch.types import CandidateDocument, MatchPreview

_TABLE_SUFFIXES = {".csv", ".jsonl"}


def _check_path(path: Path, suffixes: set[str]) -> None:
    if path.suffix not in suffixes:
        raise ValueError(
            f"Unsupported file type '{path.suffix}' for {path}; "
            f"expected one of {', '.join(sorted(suffixes))}"
        )
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")


def read_candidates(path: str | Path) -> list[CandidateDocument]:
    """Read pending documents from CSV or JSONL.

    Expected columns: id, file_name, and optionally normalized_filename and
    status. Rows without a file name are skipped.
    """
    path = Path(path)
    _check_path(path, _TABLE_SUFFIXES)

    rows = _read_jsonl(path) if path.suffix == ".jsonl" else _read_csv(path)

    docs: list[CandidateDocument] = []
    for i, row in enumerate(rows):
        doc = CandidateDocument.from_record(row)
        file_name = doc.file_name.strip()
        if not file_name:
            continue
        normalized = (doc.normalized_filename or "").strip() or None
        docs.append(
            CandidateDocument(
                id=doc.id.strip() or str(i),
                file_name=file_name,
                normalized_filename=normalized,
                status=doc.status.strip(),
            )
        )
    return docs


def read_report_names(path: str | Path, column: str = "file_name") -> list[str]:
    """Read report filenames from TXT (one per line), CSV or JSONL."""
    path = Path(path)
    _check_path(path, _TABLE_SUFFIXES | {".txt"})

    if path.suffix == ".txt":
        with path.open(encoding="utf-8") as f:
            values = [line.rstrip("\r\n") for line in f]
    else:
        rows = _read_jsonl(path) if path.suffix == ".jsonl" else _read_csv(path)
        values = [str(row.get(column) or "") for row in rows]

    return [v.strip() for v in values if v.strip()]


def _read_csv(path: Path) -> list[dict]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        return list(csv.DictReader(f))


def _read_jsonl(path: Path) -> list[dict]:
    rows: list[dict] = []
    with path.open(encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                row = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}:{lineno}: invalid JSON ({e.msg})") from e
            if not isinstance(row, dict):
                raise ValueError(f"{path}:{lineno}: expected a JSON object")
            rows.append(row)
    return rows


def preview_rows(previews: list[MatchPreview]) -> list[dict]:
    """Flatten previews into one row per report."""
    rows: list[dict] = []
    for p in previews:
        m = p.matched_document
        rows.append({
            "report_name": p.report_name,
            "normalized_key": p.normalized_key,
            "status": p.status,
            "matched_id": m.id if m else "",
            "matched_file_name": m.file_name if m else "",
            "confidence": m.confidence if m else "",
            "suggestions": "|".join(s.id for s in p.suggestions),
        })
    return rows


def write_previews(previews: list[MatchPreview], path: str | Path) -> None:
    """Write match previews to CSV or JSONL."""
    path = Path(path)
    if path.suffix not in _TABLE_SUFFIXES:
        raise ValueError(f"Unsupported output type '{path.suffix}' for {path}")

    if path.suffix == ".jsonl":
        _write_jsonl(previews, path)
    else:
        _write_csv(previews, path)


def _write_csv(previews: list[MatchPreview], path: Path) -> None:
    fieldnames = [
        "report_name", "normalized_key", "status", "matched_id",
        "matched_file_name", "confidence", "suggestions",
    ]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(preview_rows(previews))


def _write_jsonl(previews: list[MatchPreview], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        for p in previews:
            f.write(json.dumps(asdict(p)) + "\n")
