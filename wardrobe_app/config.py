"""Configuration helpers for the closet scoring service."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import Optional, Tuple

from models.taxonomy import BASIC_VIBES, NEUTRAL_COLORS, VERSATILE_CATEGORIES, ScoringVocabulary

DEFAULT_SERVICE_NAME = "closet-versatility"


def _split_terms(value: Optional[str], default: Tuple[str, ...]) -> Tuple[str, ...]:
    if value is None:
        return default
    terms = tuple(part.strip() for part in str(value).split(",") if part.strip())
    return terms or default


def _as_int(value: Optional[str], default: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"Expected an integer config value, got '{value}'") from exc


@dataclass
class ScoringConfig:
    """Configuration values for versatility and compatibility scoring.

    Vocabulary lists default to the built-in English and Spanish terms and can
    be replaced per environment without touching the matching logic.
    """

    neutral_colors: Tuple[str, ...] = field(default_factory=lambda: NEUTRAL_COLORS)
    basic_vibes: Tuple[str, ...] = field(default_factory=lambda: BASIC_VIBES)
    versatile_categories: Tuple[str, ...] = field(default_factory=lambda: VERSATILE_CATEGORIES)
    high_compatibility_threshold: int = 80
    top_pairs_limit: int = 5
    top_items_limit: int = 10
    log_level: str = "INFO"
    service_name: str = DEFAULT_SERVICE_NAME
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which take precedence.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("WARDROBE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            neutral_colors=_split_terms(get_value("neutral_colors"), NEUTRAL_COLORS),
            basic_vibes=_split_terms(get_value("basic_vibes"), BASIC_VIBES),
            versatile_categories=_split_terms(get_value("versatile_categories"), VERSATILE_CATEGORIES),
            high_compatibility_threshold=_as_int(get_value("high_compatibility_threshold"), 80),
            top_pairs_limit=_as_int(get_value("top_pairs_limit"), 5),
            top_items_limit=_as_int(get_value("top_items_limit"), 10),
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            service_name=str(get_value("service_name", DEFAULT_SERVICE_NAME) or DEFAULT_SERVICE_NAME),
            environment=env_name,
        )

    def vocabulary(self) -> ScoringVocabulary:
        return ScoringVocabulary(
            neutral_colors=self.neutral_colors,
            basic_vibes=self.basic_vibes,
            versatile_categories=self.versatile_categories,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
