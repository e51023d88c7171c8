from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

APP_DIR = "device_monitor_gui"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_presets() -> list[str]:
    return ["/", str(Path.home()), tempfile.gettempdir()]


@dataclass(frozen=True)
class ConfigPaths:
    path: Path


@dataclass(frozen=True)
class FilesystemSettings:
    path: str
    presets: list[str]


class ConfigService:
    def __init__(self, paths: ConfigPaths | None = None) -> None:
        self.paths = paths or ConfigPaths(path=self.default_path())

    @staticmethod
    def default_path() -> Path:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            base = Path(xdg)
        else:
            base = Path.home() / ".config"
        return base / APP_DIR / "config.json"

    def load(self) -> dict[str, Any]:
        p = self.paths.path
        if not p.exists():
            return {}
        try:
            with open(p, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", p, e)
            return {}
        return obj if isinstance(obj, dict) else {}

    def save(self, cfg: dict[str, Any]) -> None:
        """Write the whole config; readers never see a half-written file."""
        p = self.paths.path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2, sort_keys=True)
        tmp.replace(p)

    def filesystem_settings(self, cfg: dict[str, Any] | None = None) -> FilesystemSettings:
        cfg = self.load() if cfg is None else cfg
        fs = cfg.get("filesystem")
        fs = fs if isinstance(fs, dict) else {}

        presets_obj = fs.get("presets")
        if isinstance(presets_obj, list) and presets_obj:
            presets = [str(x) for x in presets_obj]
        else:
            presets = default_presets()
        path = str(fs.get("path") or presets[0])
        return FilesystemSettings(path=path, presets=presets)

    def log_level(self, cfg: dict[str, Any] | None = None) -> str:
        cfg = self.load() if cfg is None else cfg
        level = cfg.get("log_level")
        if isinstance(level, str) and level.upper() in _LEVELS:
            return level.upper()
        return "INFO"

    def remember_path(self, path: str) -> None:
        cfg = self.load()
        fs = cfg.get("filesystem")
        if not isinstance(fs, dict):
            fs = {}
        fs["path"] = path
        cfg["filesystem"] = fs
        self.save(cfg)
