"""Lightweight REST client for the clubfit API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the clubfit REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("profile", type=Path, nargs="?", help="Player profile JSON")
    parser.add_argument("opportunities", type=Path, nargs="?", help="JSON list of opportunities")
    parser.add_argument("--reviews", type=Path, help="JSON list of club reviews")
    parser.add_argument("--position", default=None, help="Only keep this position")
    parser.add_argument("--min-fit", type=int, default=0, help="Minimum fit score")
    parser.add_argument("--player-key", default=None, help="Player key for saved opportunities")
    parser.add_argument("--list-saved", metavar="PLAYER_KEY", help="List saved opportunities and exit")
    parser.add_argument("--toggle-saved", nargs=2, metavar=("PLAYER_KEY", "NEED_ID"), help="Toggle a saved opportunity and exit")
    args = parser.parse_args()

    if args.list_saved or args.toggle_saved:
        with httpx.Client(base_url=args.base_url) as client:
            if args.list_saved:
                resp = client.get(f"/saved/{args.list_saved}")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            if args.toggle_saved:
                player_key, need_id = args.toggle_saved
                resp = client.post(f"/saved/{player_key}/{need_id}/toggle")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
        return

    if args.profile is None or args.opportunities is None:
        raise SystemExit("profile and opportunities files are required unless using --list-saved/--toggle-saved")

    payload = {
        "profile": load_json(args.profile),
        "opportunities": load_json(args.opportunities),
        "reviews": load_json(args.reviews) if args.reviews else None,
        "position": args.position,
        "min_fit_score": args.min_fit,
        "player_key": args.player_key,
    }

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/opportunities/rank", json=payload)
        if resp.status_code == 422:
            raise SystemExit(f"Request rejected: {resp.text}")
        resp.raise_for_status()
        body = resp.json()
        print(f"Matched {body['matched']}/{body['total']} opportunities")
        for item in body["opportunities"]:
            opportunity = item["opportunity"]
            print(f"{item['score']:>3}  {item['label']:<14} {opportunity['posting_club_name']} - {opportunity['position_needed']}")


if __name__ == "__main__":
    main()
