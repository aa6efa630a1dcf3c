"""Configuration helpers for the wardrobe sanctuary app."""

from dataclasses import dataclass
from pathlib import Path
import logging
import os
from typing import Any, Mapping, Optional

MAX_DAILY_OUTFITS = 6


@dataclass
class SanctuaryConfig:
    """Configuration values for the sanctuary app.

    The styling engine itself is configuration free; these values decide how
    the app boundary seeds randomness, sizes the daily rotation, measures
    recency and serves HTTP.
    """

    environment: str | None = None
    log_level: str = "INFO"
    random_seed: Optional[int] = None
    daily_outfit_count: int = 3
    recency_days: int = 30
    host: str = "0.0.0.0"
    port: int = 8080

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log_level '{self.log_level}'")
        if not 0 <= self.daily_outfit_count <= MAX_DAILY_OUTFITS:
            raise ValueError(f"daily_outfit_count must be within [0, {MAX_DAILY_OUTFITS}], got {self.daily_outfit_count}")
        if self.recency_days < 1:
            raise ValueError(f"recency_days must be positive, got {self.recency_days}")
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be a valid TCP port, got {self.port}")

    @classmethod
    def from_env(cls) -> "SanctuaryConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default (``SANCTUARY_CONFIG_DIR`` moves it, ``APP_CONFIG_PATH`` names a
        file directly). Upper-cased environment variables win over YAML keys.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("SANCTUARY_CONFIG_DIR", "config/environments"))
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
            value = os.getenv(key.upper(), yaml_config.get(key))
            return default if value is None or str(value).strip() == "" else value

        return cls(
            environment=env_name or yaml_config.get("environment"),
            log_level=str(get_value("log_level", "INFO")),
            random_seed=_as_int("random_seed", get_value("random_seed")),
            daily_outfit_count=_as_int("daily_outfit_count", get_value("daily_outfit_count", "3")),
            recency_days=_as_int("recency_days", get_value("recency_days", "30")),
            host=str(get_value("host", "0.0.0.0")),
            port=_as_int("port", get_value("port", "8080")),
        )

    def as_log_fields(self) -> Mapping[str, Any]:
        return {
            "environment": self.environment or "local",
            "seeded": self.random_seed is not None,
            "daily_outfit_count": self.daily_outfit_count,
            "recency_days": self.recency_days,
        }

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal ``key: value`` YAML file without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.split(" #", 1)[0].strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            config[key.strip()] = value
        return config


def _as_int(key: str, raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise ValueError(f"Config value '{key}' must be an integer, got {raw!r}") from exc


__all__ = ["SanctuaryConfig", "MAX_DAILY_OUTFITS"]
