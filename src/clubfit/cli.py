"""Command-line interface for ranking opportunities against a player profile."""

from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path

from clubfit.config_loader import ColumnProfile
from clubfit.ingest import load_opportunities_from_csv, load_player_profile, load_reviews_csv
from clubfit.ranking import OpportunityFilter, browse_opportunities


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank club opportunities by player fit")
    parser.add_argument("opportunities", type=Path, help="Path to opportunities CSV")
    parser.add_argument("--profile", type=Path, required=True, help="Player profile JSON")
    parser.add_argument("--reviews", type=Path, default=None, help="Optional club reviews CSV")
    parser.add_argument("--position", default=None, help="Only keep this position (or 'all')")
    parser.add_argument("--min-fit", type=int, default=0, help="Minimum fit score to keep")
    parser.add_argument("--search", default="", help="Filter by club, position or notes text")
    parser.add_argument(
        "--opportunity-column",
        action="append",
        default=[],
        help="Mapping for opportunity CSV columns (e.g., posting_club_name=Club)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=Path("ranked.csv"), help="Output CSV path")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        mapping = _parse_mapping(args.opportunity_column)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.load_profile:
        try:
            column_profile = ColumnProfile.load(args.load_profile)
        except (OSError, ValueError) as exc:
            raise SystemExit(f"Could not load column profile: {exc}") from exc
        mapping = column_profile.opportunity_mapping | mapping

    try:
        profile = load_player_profile(args.profile)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Could not load player profile: {exc}") from exc

    try:
        opportunities, report = load_opportunities_from_csv(args.opportunities, mapping=mapping or None)
    except OSError as exc:
        raise SystemExit(f"Could not read opportunities: {exc}") from exc
    print(f"Loaded {report.loaded_rows}/{report.total_rows} opportunities")
    if report.skipped_rows:
        preview = ", ".join(report.skipped_rows[:5])
        more = len(report.skipped_rows) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Skipped rows: {preview}{suffix}")

    if args.save_profile:
        ColumnProfile(mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    try:
        reviews = load_reviews_csv(args.reviews) if args.reviews else None
    except OSError as exc:
        raise SystemExit(f"Could not read reviews: {exc}") from exc
    result = browse_opportunities(
        opportunities,
        profile,
        reviews=reviews,
        criteria=OpportunityFilter(position=args.position, min_fit_score=args.min_fit, search=args.search),
    )

    with args.output.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([
            "rank",
            "need_id",
            "club",
            "position",
            "score",
            "label",
            "club_rating",
            "review_count",
            "reasons",
        ])
        for rank, item in enumerate(result.opportunities, start=1):
            opportunity = item.opportunity
            writer.writerow([
                rank,
                opportunity.need_id,
                opportunity.posting_club_name,
                opportunity.position_needed,
                item.score,
                item.label,
                "-" if opportunity.club_rating is None else f"{opportunity.club_rating:.1f}",
                opportunity.review_count,
                " | ".join(reason.text for reason in item.fit.reasons),
            ])

    print(f"Wrote {result.matched}/{result.total} ranked opportunities to {args.output}")


if __name__ == "__main__":
    main()
