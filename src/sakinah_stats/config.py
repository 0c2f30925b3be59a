"""Configuration file management for sakinah-stats.

Reads and writes ~/.sakinah/config.json (language, API endpoint, retry and
cache settings).
"""
from __future__ import annotations

import json
from pathlib import Path

from sakinah_stats.cache import DEFAULT_CACHE_PATH
from sakinah_stats.quran import DEFAULT_API_URL

DEFAULT_CONFIG_PATH: Path = Path.home() / ".sakinah" / "config.json"
LANGUAGES = ("en", "bm")


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_language(config_path: Path | None = None) -> str:
    """Return the display language ('en' or 'bm'), defaulting to 'en'."""
    lang = load_config(config_path).get("language")
    return lang if lang in LANGUAGES else "en"


def set_language(lang: str, config_path: Path | None = None) -> None:
    if lang not in LANGUAGES:
        raise ValueError(f"Unsupported language: {lang}")
    config = load_config(config_path)
    config["language"] = lang
    save_config(config, config_path)


def get_quran_api_url(config_path: Path | None = None) -> str:
    return load_config(config_path).get("quran_api_url") or DEFAULT_API_URL


def get_max_retries(config_path: Path | None = None) -> int:
    """Fetch attempts for network content. Invalid values fall back to 3."""
    raw = load_config(config_path).get("max_retries", 3)
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        return 3


def get_cache_path(config_path: Path | None = None) -> Path:
    raw = load_config(config_path).get("cache_path")
    if raw:
        return Path(raw)
    return DEFAULT_CACHE_PATH


def get_log_level(config_path: Path | None = None) -> str:
    return str(load_config(config_path).get("log_level", "WARNING")).upper()
