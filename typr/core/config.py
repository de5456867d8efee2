from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from typr.core.words import DIFFICULTY_FILTERS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".typr" / "config.yaml"


@dataclass(frozen=True)
class Settings:
    length: int = 25
    difficulty: str = "normal"
    padding: int = 10
    word_file: Optional[Path] = None
    log_file: Optional[Path] = None

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return _validated(replace(self, **changes), "command line")


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from a YAML file; a missing file yields the defaults.

    File: ~/.typr/config.yaml unless ``path`` is given. Recognised keys are
    ``length``, ``difficulty``, ``padding``, ``word_file`` and ``log_file``.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return Settings()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"{config_path.name}: invalid YAML ({e})") from e

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a mapping of settings")

    unknown = set(raw) - {"length", "difficulty", "padding", "word_file", "log_file"}
    if unknown:
        logger.warning("%s: ignoring unknown settings %s", config_path.name, ", ".join(sorted(unknown)))

    values: dict[str, Any] = {}
    for key in ("length", "padding"):
        if key in raw:
            if isinstance(raw[key], bool) or not isinstance(raw[key], int):
                raise ValueError(f"{config_path.name}: '{key}' must be an integer")
            values[key] = raw[key]
    if "difficulty" in raw:
        values["difficulty"] = str(raw["difficulty"]).strip()
    for key in ("word_file", "log_file"):
        if raw.get(key):
            values[key] = Path(str(raw[key])).expanduser()

    logger.info("Loaded settings from %s", config_path)
    return _validated(Settings(**values), config_path.name)


def _validated(settings: Settings, source: str) -> Settings:
    if settings.length < 1:
        raise ValueError(f"{source}: 'length' must be at least 1")
    if settings.padding < 0:
        raise ValueError(f"{source}: 'padding' must not be negative")
    if settings.difficulty not in DIFFICULTY_FILTERS:
        valid = ", ".join(DIFFICULTY_FILTERS)
        raise ValueError(f"{source}: 'difficulty' must be one of: {valid}")
    return settings
