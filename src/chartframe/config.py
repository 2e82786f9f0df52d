"""Persisted preferences for the chart gallery."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Optional

import json
import logging

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".chartframe_config.json"


@dataclass
class WindowState:
    """Last gallery window size."""

    width: int = 960
    height: int = 640


@dataclass
class AppConfig:
    """Gallery settings saved between runs."""

    selected_chart: str = "line"
    dark_mode: Optional[bool] = None  # None follows the system scheme
    animate: bool = True
    dataset: str = "normal"
    window: WindowState = field(default_factory=WindowState)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("config root must be a JSON object")
        w = data.get("window", {})
        dark = data.get("dark_mode")
        return AppConfig(
            selected_chart=str(data.get("selected_chart", "line")),
            dark_mode=None if dark is None else bool(dark),
            animate=bool(data.get("animate", True)),
            dataset=str(data.get("dataset", "normal")),
            window=WindowState(
                width=max(1, int(w.get("width", 960))),
                height=max(1, int(w.get("height", 640))),
            ),
        )


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Read the config at ``path``; defaults when missing, unreadable or corrupt."""
    p = path if path is not None else default_config_path()
    if not p.exists():
        return AppConfig()
    try:
        return AppConfig.from_json(p.read_text(encoding="utf-8"))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", p, exc)
        return AppConfig()


def save_config(cfg: AppConfig, path: Optional[Path] = None) -> bool:
    """Write ``cfg`` to ``path``; returns False (and logs) if it cannot be written."""
    p = path if path is not None else default_config_path()
    try:
        p.write_text(cfg.to_json(), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save config to %s: %s", p, exc)
        return False
    return True


__all__ = [
    "AppConfig",
    "WindowState",
    "CONFIG_FILENAME",
    "default_config_path",
    "load_config",
    "save_config",
]
