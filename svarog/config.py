"""Simple configuration loader for svarog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from svarog.templates import CreatureTemplate, template_from_dict


logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class LoggingConfig:
    """Log levels: one global level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    templates: Dict[str, CreatureTemplate] = field(default_factory=dict)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    logging_data = data.get("logging") or {}
    logging_config = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(module): str(level).upper()
            for module, level in (logging_data.get("module_levels") or {}).items()
        },
    )

    templates = {
        name: template_from_dict(name, raw)
        for name, raw in (data.get("templates") or {}).items()
    }

    return Config(logging=logging_config, templates=templates)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


def configure_logging(config: Config) -> None:
    """Apply ``config.logging`` to the standard ``logging`` module."""

    level = getattr(logging, config.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for module_name, level_str in config.logging.module_levels.items():
        module_level = getattr(logging, level_str, None)
        if module_level is not None:
            logging.getLogger(module_name).setLevel(module_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.",
                level_str,
                module_name,
            )


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "LoggingConfig",
    "configure_logging",
    "load_config",
]
