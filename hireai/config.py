"""Load environment and optional YAML settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from hireai.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
DATA_DIR: Path = ROOT_DIR / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DATA_DIR
    storage_key: str = "hireai_jobs"
    search_region: str = "Pakistan"
    default_search_query: str = "Government and Private jobs in Pakistan"
    notification_seconds: float = 3.0


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings(path: Path | None = None) -> Settings:
    """Defaults, overridden by whatever keys settings.yaml sets."""
    path = path or SETTINGS_PATH
    settings = Settings()
    if not path.exists():
        return settings

    with open(path, "r", encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    known = {fld.name for fld in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        log.warning("Ignoring unknown settings in %s: %s", path.name, ", ".join(unknown))

    overrides = {k: v for k, v in data.items() if k in known}
    if "data_dir" in overrides:
        data_dir = Path(overrides["data_dir"]).expanduser()
        overrides["data_dir"] = data_dir if data_dir.is_absolute() else ROOT_DIR / data_dir
    if "notification_seconds" in overrides:
        overrides["notification_seconds"] = float(overrides["notification_seconds"])
    return replace(settings, **overrides)


def ensure_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
