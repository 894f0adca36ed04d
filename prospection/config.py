from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

_PACKAGE_ROOT = Path(__file__).resolve().parent
_REPO_ROOT = _PACKAGE_ROOT.parent
_ENV_LOADED = False
_ENV_FILES = (
    _REPO_ROOT / ".env.local",
    _REPO_ROOT / ".env",
)

# Illustrative weights only; set PROSPECTION_LEXICON_PATH to the published table for real scores.
DEFAULT_LEXICON_PATH = _PACKAGE_ROOT / "data" / "sample_lexicon.json"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_ENCODINGS = {"binary", "frequency"}


def _load_env_file(path: Path) -> None:
    """Best-effort `.env` loader that respects already-set variables."""
    if not path.exists():
        return
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if key and key not in os.environ:
            os.environ[key] = value


def load_environment() -> None:
    """Load environment files once, preferring explicitly exported values."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    for candidate in _ENV_FILES:
        _load_env_file(candidate)
    _ENV_LOADED = True


def _get_env(*keys: str) -> Optional[str]:
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return None


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    lexicon_path: Path
    log_level: str
    default_concurrency: int
    default_encoding: str
    api_token: Optional[str]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached project settings sourced from env variables."""
    load_environment()

    def _resolve_path(env_value: Optional[str], *, default: Path) -> Path:
        if env_value:
            raw_path = Path(env_value).expanduser()
            return raw_path if raw_path.is_absolute() else (_REPO_ROOT / raw_path)
        return default

    lexicon_path = _resolve_path(os.getenv("PROSPECTION_LEXICON_PATH"), default=DEFAULT_LEXICON_PATH)

    log_level = (os.getenv("PROSPECTION_LOG_LEVEL") or "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "WARNING"

    default_concurrency = _optional_int(_get_env("PROSPECTION_CONCURRENCY", "CONCURRENCY")) or 4
    default_concurrency = max(1, default_concurrency)

    default_encoding = (os.getenv("PROSPECTION_ENCODING") or "binary").strip().lower()
    if default_encoding not in _ENCODINGS:
        default_encoding = "binary"

    api_token = os.getenv("PROSPECTION_API_TOKEN") or None

    return Settings(
        lexicon_path=lexicon_path.resolve(),
        log_level=log_level,
        default_concurrency=default_concurrency,
        default_encoding=default_encoding,
        api_token=api_token,
    )


__all__ = ["DEFAULT_LEXICON_PATH", "Settings", "get_settings", "load_environment"]
