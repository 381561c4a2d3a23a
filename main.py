"""Command line entrypoint to score a closet export locally."""

import argparse
import json
from pathlib import Path

from models.capsule import capsule_from_raw
from models.garment import garments_from_raw
from wardrobe_app.app import ClosetScoringApp


def _load_json(path: str):
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rank closet garments by versatility.")
    parser.add_argument("closet", help="Path to a JSON array of closet items")
    parser.add_argument("--limit", type=int, default=None, help="Number of ranked items to print")
    parser.add_argument("--capsule", help="Optional capsule wardrobe JSON with a compatibility matrix")
    args = parser.parse_args(argv)

    app = ClosetScoringApp()
    closet = garments_from_raw(_load_json(args.closet))
    report = {
        "top_versatile": [entry.to_dict() for entry in app.top_versatile_items(closet, limit=args.limit)],
        "stats": app.closet_stats(closet),
    }
    if args.capsule:
        report["capsule"] = app.capsule_summary(capsule_from_raw(_load_json(args.capsule)))
    print(json.dumps(report, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
