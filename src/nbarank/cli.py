"""Command-line interface for ranking players from a season-statistics CSV."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from nbarank.analysis import run_analysis
from nbarank.config import ConfigurationError, load_config
from nbarank.config_loader import ColumnProfile
from nbarank.ingest import load_records_from_csv
from nbarank.reports import REPORT_NAMES, report_to_csv, resolve_report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank NBA players by weighted career score")
    parser.add_argument("seasons", type=Path, help="Path to per-season statistics CSV")
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of ranked players to keep (default NBARANK_TOP_N or 15)",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for CSV columns (e.g., pts=points)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to write one CSV per report",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write the full analysis as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    season_mapping = _parse_mapping(args.column)
    if args.load_profile:
        profile = ColumnProfile.load(args.load_profile)
        season_mapping = profile.season_mapping | season_mapping
    if args.save_profile:
        ColumnProfile(season_mapping).save(args.save_profile)
        print(f"Saved column profile to {args.save_profile}")

    try:
        config = load_config(args.top_n)
    except ConfigurationError as exc:
        parser.error(str(exc))
    records = load_records_from_csv(args.seasons, mapping=season_mapping or None)
    result = run_analysis(records, config)

    print(f"Top {len(result.rankings)} of {result.total_players} players")
    for player in result.rankings:
        print(f"{player.rank:>3}. {player.player_name:<28} {player.score:>8.2f}")

    if args.output_dir:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        for name in REPORT_NAMES:
            path = args.output_dir / f"{name}.csv"
            path.write_text(report_to_csv(resolve_report(result, name)), encoding="utf-8")
        print(f"Wrote {len(REPORT_NAMES)} reports to {args.output_dir}")

    if args.report:
        args.report.write_text(json.dumps(asdict(result), indent=2), encoding="utf-8")
        print(f"Wrote analysis report to {args.report}")


if __name__ == "__main__":
    main()
