"""Configuration loading tests."""

from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.taxonomy import NEUTRAL_COLORS
from wardrobe_app.config import ScoringConfig

_ENV_KEYS = (
    "APP_ENV",
    "APP_CONFIG_PATH",
    "WARDROBE_CONFIG_DIR",
    "NEUTRAL_COLORS",
    "BASIC_VIBES",
    "VERSATILE_CATEGORIES",
    "HIGH_COMPATIBILITY_THRESHOLD",
    "TOP_PAIRS_LIMIT",
    "TOP_ITEMS_LIMIT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_environment() -> None:
    config = ScoringConfig.from_env()

    assert config.high_compatibility_threshold == 80
    assert config.top_pairs_limit == 5
    assert config.top_items_limit == 10
    assert config.environment is None
    assert config.vocabulary().neutral_colors == NEUTRAL_COLORS


def test_environment_file_is_merged_with_env_vars(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_dir = tmp_path / "environments"
    config_dir.mkdir()
    (config_dir / "staging.yaml").write_text(
        "# staging overrides\n"
        "neutral_colors: \"negro, blanco, marfil\"\n"
        "high_compatibility_threshold: 75\n"
        "top_pairs_limit: 3\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("WARDROBE_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("TOP_PAIRS_LIMIT", "8")

    config = ScoringConfig.from_env()

    assert config.environment == "staging"
    assert config.neutral_colors == ("negro", "blanco", "marfil")
    assert config.high_compatibility_threshold == 75
    assert config.top_pairs_limit == 8
    assert config.vocabulary().is_neutral_color("Marfil")


def test_explicit_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "scoring.yaml"
    path.write_text("versatile_categories: top, bottom, one_piece\nlog_level: debug\n", encoding="utf-8")
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))

    config = ScoringConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.vocabulary().versatile_categories == ("top", "bottom", "one-piece")


def test_invalid_integer_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOP_ITEMS_LIMIT", "many")

    with pytest.raises(ValueError):
        ScoringConfig.from_env()
