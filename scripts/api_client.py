"""Lightweight REST client for the nbarank API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(value: str) -> str | None:
    if not value:
        return None
    try:
        json.loads(value)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc
    return value


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the nbarank REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("seasons", type=Path, help="Season statistics CSV")
    parser.add_argument("--top-n", type=int, default=None, help="Number of ranked players to keep")
    parser.add_argument("--column-mapping", default="", help="JSON mapping for CSV columns")
    parser.add_argument("--export", metavar="REPORT", help="Download one report as CSV (e.g. colleges)")
    parser.add_argument("--export-path", type=Path, help="Destination path for exported CSV")
    args = parser.parse_args()

    data: dict[str, str] = {}
    if args.top_n is not None:
        data["top_n"] = str(args.top_n)
    mapping = build_mapping(args.column_mapping)
    if mapping:
        data["column_mapping"] = mapping

    files = {"seasons": (args.seasons.name, args.seasons.read_bytes(), "text/csv")}

    with httpx.Client(base_url=args.base_url) as client:
        if args.export:
            resp = client.post(f"/analysis/export/{args.export}", files=files, data=data)
            if resp.status_code == 404:
                raise SystemExit(f"report {args.export} not found")
            resp.raise_for_status()
            if args.export_path:
                args.export_path.write_text(resp.text)
                print(f"CSV export saved to {args.export_path}")
            else:
                print(resp.text)
            return

        resp = client.post("/analysis", files=files, data=data)
        resp.raise_for_status()
        payload = resp.json()
        print(f"Ranked {len(payload['rankings'])} of {payload['total_players']} players")
        for player in payload["rankings"]:
            print(f"{player['rank']:>3}. {player['player_name']:<28} {player['score']:>8.2f}")
        print("Peak seasons:", json.dumps(payload["peak_seasons"], indent=2))


if __name__ == "__main__":
    main()
