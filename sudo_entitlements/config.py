"""
Configuration for the entitlements client.

Settings come from the Sudo Platform JSON config file (the ``apiService``
section) and can be overridden through environment variables, optionally
loaded from a ``.env`` file.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "SUDO_PLATFORM_CONFIG_PATH"
API_URL_ENV = "SUDO_ENTITLEMENTS_API_URL"
TIMEOUT_SECONDS_ENV = "SUDO_ENTITLEMENTS_TIMEOUT_SECONDS"
LOG_LEVEL_ENV = "SUDO_ENTITLEMENTS_LOG_LEVEL"

CONFIG_FILENAME = "sudoplatformconfig.json"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ClientConfig:
    api_url: str
    region: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def get_config_path() -> Path:
    """Return the platform config file path.

    ``SUDO_PLATFORM_CONFIG_PATH`` overrides the user-level default.
    """
    override = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override)

    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming")))
        return base / "sudoplatform" / CONFIG_FILENAME

    return Path.home() / ".config" / "sudoplatform" / CONFIG_FILENAME


def _to_float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, raw)
        return default
    return value if value > 0 else default


def _read_api_service_section(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Unable to read platform config {path}: {e}") from e
    section = data.get("apiService") if isinstance(data, dict) else None
    return section if isinstance(section, dict) else {}


def load_config(path: str | Path | None = None, *, dotenv: bool = True) -> ClientConfig:
    """Build a ``ClientConfig`` from the platform config file and environment.

    Args:
        path:   Explicit platform config path; defaults to ``get_config_path()``.
        dotenv: Load a ``.env`` file into the environment first.

    Raises:
        ValueError: If no API URL is configured or the config file is unreadable.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    config_path = Path(path) if path is not None else get_config_path()
    section = _read_api_service_section(config_path)

    api_url = os.environ.get(API_URL_ENV, "").strip() or section.get("apiUrl")
    if not api_url:
        raise ValueError(
            f"No entitlements API URL configured. Set {API_URL_ENV} or provide "
            f"apiService.apiUrl in {config_path}"
        )

    log_level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL

    return ClientConfig(
        api_url=str(api_url),
        region=section.get("region"),
        timeout_seconds=_to_float_env(TIMEOUT_SECONDS_ENV, DEFAULT_TIMEOUT_SECONDS),
        log_level=log_level,
    )
