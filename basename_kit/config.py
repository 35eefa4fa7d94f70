"""
basename-kit — Configuration loading and logging setup.

Settings come from a JSON file (basename-kit.config.json by default).
A missing file yields the defaults; unknown keys are ignored.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from .adapters import PROFILES

logger = logging.getLogger("basename_kit.config")

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULTS",
    "Settings",
    "configure_logging",
    "load_settings",
    "write_default_config",
]

CONFIG_FILENAME = "basename-kit.config.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULTS = {
    "profile": "full",
    "log_level": "INFO",
    "suffix": "",
}


@dataclass(frozen=True)
class Settings:
    """Resolved, validated configuration."""

    profile: str = "full"
    log_level: str = "INFO"
    suffix: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def _check_choice(value, valid, label: str) -> str:
    if not isinstance(value, str) or value not in valid:
        choices = ", ".join(sorted(valid))
        raise ValueError(f"Invalid {label}: {value!r}. Valid values: {choices}")
    return value


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from *config_path*, falling back to defaults."""
    raw = dict(DEFAULTS)
    if config_path is not None:
        cfg_path = Path(config_path).resolve()
        if cfg_path.is_file():
            with open(cfg_path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"Config {cfg_path} must hold a JSON object")
            raw.update({k: v for k, v in data.items() if k in DEFAULTS})
            logger.debug("Loaded config from %s", cfg_path)
        else:
            logger.debug("No config at %s, using defaults", cfg_path)

    suffix = raw["suffix"]
    if not isinstance(suffix, str):
        raise ValueError(f"Invalid suffix: {suffix!r}. Must be a string")

    return Settings(
        profile=_check_choice(raw["profile"], PROFILES, "profile"),
        log_level=_check_choice(str(raw["log_level"]).upper(), _LOG_LEVELS, "log_level"),
        suffix=suffix,
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Configure the package logger, not the root logger."""
    pkg_logger = logging.getLogger("basename_kit")
    pkg_logger.setLevel(getattr(logging, level))
    if not pkg_logger.handlers or all(
        isinstance(h, logging.NullHandler) for h in pkg_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        ))
        pkg_logger.addHandler(handler)
    return pkg_logger


def write_default_config(target_dir: str | Path) -> Path:
    """Write a default config into *target_dir*. Existing files are kept."""
    target = Path(target_dir).resolve()
    target.mkdir(parents=True, exist_ok=True)
    config_path = target / CONFIG_FILENAME
    if config_path.exists():
        logger.info("Config already exists: %s", config_path)
        return config_path
    config_path.write_text(json.dumps(DEFAULTS, indent=2) + "\n", encoding="utf-8")
    logger.info("Config created: %s", config_path)
    return config_path
