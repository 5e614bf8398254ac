"""CLI tool for pairing bulk-uploaded reports with pending documents."""

import argparse
import sys
from pathlib import Path

import pandas as pd
import structlog

from reportmatch.io import preview_rows, read_candidates, read_report_names, write_previews
from reportmatch.logging import configure_logging
from reportmatch.matcher import confidence_band, preview_matches, suggest_documents, summarize_previews
from reportmatch.normalize import extract_mapping_key, normalize, normalize_group_key
from reportmatch.pairing import auto_map_reports, pair_reports
from reportmatch.reports import classify_report_text


def cmd_preview(args: argparse.Namespace) -> None:
    log = structlog.get_logger()
    log.info("load_files_start", reports=args.reports, candidates=args.candidates)
    report_names = read_report_names(args.reports)
    candidates = read_candidates(args.candidates)
    log.info("files_loaded", report_count=len(report_names), candidate_count=len(candidates))

    previews = preview_matches(report_names, candidates)
    df_out = pd.DataFrame(preview_rows(previews))

    if args.show:
        _show_previews(df_out)

    stats = summarize_previews(previews)
    print(f"\nResults: EXACT={stats.exact}, PARTIAL={stats.partial}, NONE={stats.none}")
    print(f"{stats.exact + stats.partial} of {stats.total} reports have a proposed document")

    if args.output:
        output = Path(args.output)
        if output.suffix == ".xlsx":
            df_out.to_excel(output, index=False)
        else:
            write_previews(previews, output)
        print(f"\nSaved to: {output}")


def _show_previews(df: pd.DataFrame) -> None:
    """Display previews on screen."""
    if df.empty:
        print("\n=== No reports ===")
        return

    display_cols = ["report_name", "status", "matched_file_name", "confidence"]
    print(f"\n=== Previews ({len(df)}) ===")
    print(df[display_cols].to_string(index=False))


def cmd_suggest(args: argparse.Namespace) -> None:
    candidates = read_candidates(args.candidates)
    suggestions = suggest_documents(
        args.report,
        candidates,
        max_suggestions=args.limit,
        min_confidence=args.min_confidence,
    )

    print(f"=== Suggestions for '{args.report}' ({len(suggestions)} results) ===")
    if not suggestions:
        print("  No similar documents found.")
        return

    df = pd.DataFrame([
        {
            "id": s.id,
            "file_name": s.file_name,
            "confidence": s.confidence,
            "band": confidence_band(s.confidence),
        }
        for s in suggestions
    ])
    print(df.to_string(index=False))


def cmd_pair(args: argparse.Namespace) -> None:
    report_names = read_report_names(args.reports)
    candidates = read_candidates(args.candidates)
    pairings = pair_reports(report_names, candidates)

    df = pd.DataFrame([
        {
            "report_name": p.report_name,
            "group_key": p.group_key,
            "outcome": p.outcome,
            "documents": "|".join(d.id for d in p.documents),
        }
        for p in pairings
    ])

    if df.empty:
        print("No reports.")
        return

    print(df.to_string(index=False))
    counts = df["outcome"].value_counts()
    parts = [f"{outcome.upper()}={counts.get(outcome, 0)}" for outcome in ("mapped", "ambiguous", "unmatched")]
    print(f"\nResults: {', '.join(parts)}")


def cmd_automap(args: argparse.Namespace) -> None:
    report_names = read_report_names(args.reports)
    candidates = read_candidates(args.candidates)
    result = auto_map_reports(report_names, candidates)

    if result.mapped:
        df = pd.DataFrame([
            {
                "report_name": m.report_name,
                "mapping_key": m.mapping_key,
                "document_id": m.document.id,
                "document_file_name": m.document.file_name,
            }
            for m in result.mapped
        ])
        print(f"=== Mapped ({len(result.mapped)}) ===")
        print(df.to_string(index=False))

    if result.unmapped:
        print(f"\n=== Unmapped ({len(result.unmapped)}) ===")
        for name in result.unmapped:
            print(f"  {name}")

    s = result.stats
    print(f"\nResults: MAPPED={s.mapped}, UNMAPPED={s.unmapped} (of {s.total})")


def cmd_normalize(args: argparse.Namespace) -> None:
    df = pd.DataFrame([
        {
            "original": name,
            "normalized": normalize(name),
            "group_key": normalize_group_key(name),
            "mapping_key": extract_mapping_key(name),
        }
        for name in args.names
    ])
    print(df.to_string(index=False))


def cmd_classify(args: argparse.Namespace) -> None:
    text = Path(args.path).read_text(encoding="utf-8")
    result = classify_report_text(text)
    percentage = f"{result.percentage}%" if result.percentage is not None else "n/a"
    print(f"type: {result.report_type}")
    print(f"percentage: {percentage}")


def main() -> None:
    # Parent parser with global options (inherited by all subcommands)
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )

    parser = argparse.ArgumentParser(
        description="Report filename matching CLI",
        parents=[parent_parser],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # preview subcommand
    preview_parser = subparsers.add_parser("preview", parents=[parent_parser], help="Preview report/document matches")
    preview_parser.add_argument("--reports", required=True, help="Report filenames (.txt, .csv or .jsonl)")
    preview_parser.add_argument("--candidates", required=True, help="Pending documents (.csv or .jsonl)")
    preview_parser.add_argument("--output", help="Output file (.csv, .jsonl or .xlsx)")
    preview_parser.add_argument("--show", action="store_true", help="Display previews on screen")
    preview_parser.set_defaults(func=cmd_preview)

    # suggest subcommand
    suggest_parser = subparsers.add_parser("suggest", parents=[parent_parser], help="Suggest documents for one report")
    suggest_parser.add_argument("report", help="Report filename")
    suggest_parser.add_argument("--candidates", required=True, help="Pending documents (.csv or .jsonl)")
    suggest_parser.add_argument("--limit", type=int, default=None, help="Maximum suggestions (default: 5)")
    suggest_parser.add_argument("--min-confidence", type=int, default=None, help="Minimum confidence (default: 40)")
    suggest_parser.set_defaults(func=cmd_suggest)

    # pair subcommand
    pair_parser = subparsers.add_parser("pair", parents=[parent_parser], help="Pair reports by exact grouping key")
    pair_parser.add_argument("--reports", required=True, help="Report filenames (.txt, .csv or .jsonl)")
    pair_parser.add_argument("--candidates", required=True, help="Pending documents (.csv or .jsonl)")
    pair_parser.set_defaults(func=cmd_pair)

    # automap subcommand
    automap_parser = subparsers.add_parser("automap", parents=[parent_parser], help="Map reports one-to-one by mapping key")
    automap_parser.add_argument("--reports", required=True, help="Report filenames (.txt, .csv or .jsonl)")
    automap_parser.add_argument("--candidates", required=True, help="Pending documents (.csv or .jsonl)")
    automap_parser.set_defaults(func=cmd_automap)

    # normalize subcommand
    normalize_parser = subparsers.add_parser("normalize", parents=[parent_parser], help="Show normalized keys")
    normalize_parser.add_argument("names", nargs="+", help="Filenames to normalize")
    normalize_parser.set_defaults(func=cmd_normalize)

    # classify subcommand
    classify_parser = subparsers.add_parser("classify", parents=[parent_parser], help="Classify extracted report text")
    classify_parser.add_argument("path", help="Text file extracted from a report")
    classify_parser.set_defaults(func=cmd_classify)

    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        args.func(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
