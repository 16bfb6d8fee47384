from __future__ import annotations

import logging
from pathlib import Path

from mcp_config_check.models import API_KEY_NAME, API_KEY_PLACEHOLDER, EnvStatus

logger = logging.getLogger(__name__)


def has_configured_api_key(text: str) -> bool:
    """Literal substring check, the value itself is never parsed."""
    assignment = f"{API_KEY_NAME}="
    return assignment in text and f"{assignment}{API_KEY_PLACEHOLDER}" not in text


def probe_env_file(path: Path) -> EnvStatus:
    if not path.is_file():
        logger.debug("env file not found at %s", path)
        return EnvStatus(path=path, present=False)

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("could not read %s: %s", path, exc)
        return EnvStatus(path=path, present=True, api_key_configured=False)

    return EnvStatus(path=path, present=True, api_key_configured=has_configured_api_key(text))
