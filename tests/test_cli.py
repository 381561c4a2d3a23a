"""Command line entrypoint tests."""

import json
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import main


def test_main_prints_ranking_and_capsule_summary(tmp_path: Path, capsys) -> None:
    closet_path = tmp_path / "closet.json"
    closet_path.write_text(
        json.dumps(
            [
                {"id": "tee", "metadata": {"category": "top", "color_primary": "negro"}},
                {"id": "jeans", "metadata": {"category": "bottom", "color_primary": "azul"}},
                {"id": "boots", "metadata": {"category": "shoes", "color_primary": "marrón"}},
                {"metadata": {"category": "top"}},
            ]
        ),
        encoding="utf-8",
    )
    capsule_path = tmp_path / "capsule.json"
    capsule_path.write_text(
        json.dumps(
            {
                "items": [{"item_id": "tee", "category": "top"}],
                "compatibility_matrix": [{"item1_id": "tee", "item2_id": "jeans", "compatibility_score": 90}],
            }
        ),
        encoding="utf-8",
    )

    main.main([str(closet_path), "--limit", "1", "--capsule", str(capsule_path)])

    report = json.loads(capsys.readouterr().out)
    assert [item["item_id"] for item in report["top_versatile"]] == ["tee"]
    assert report["stats"]["total_items"] == 3
    assert report["capsule"]["average_compatibility"] == 90
