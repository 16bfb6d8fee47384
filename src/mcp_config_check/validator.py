from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mcp_config_check.env_probe import probe_env_file
from mcp_config_check.errors import ConfigCheckError, ErrorCode
from mcp_config_check.lookup import dig, is_truthy
from mcp_config_check.models import (
    CAPABILITY_FLAGS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ENV_FILENAME,
    PRIMARY_SERVER,
    REQUIRED_FIELDS,
    EnvStatus,
    IntegrationStatus,
    ServerStatus,
    ValidationReport,
)

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not part of JSON proper.
    raise ValueError(f"unexpected token {name}")


class ConfigValidator:
    """Single synchronous pass over ``mcp.json`` and its sibling ``.env``.

    Steps up to :meth:`require_fields` raise :class:`ConfigCheckError`; the
    reporting steps after them only observe and never raise.
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        *,
        env_filename: str = DEFAULT_ENV_FILENAME,
    ) -> None:
        self.config_path = Path(config_path) if config_path is not None else Path.cwd() / DEFAULT_CONFIG_FILENAME
        self.env_path = self.config_path.parent / env_filename

    def validate(self) -> ValidationReport:
        config = self.load()
        primary = self.require_primary(config)
        self.require_fields(primary)
        logger.debug("%s entry passed required field checks", PRIMARY_SERVER)

        settings = primary.get("settings")
        return ValidationReport(
            config_path=self.config_path,
            capabilities=self.read_capabilities(settings),
            integration=self.read_integration(settings),
            servers=self.list_servers(config),
            env=self.probe_env(),
        )

    def load(self) -> Any:
        if not self.config_path.exists():
            raise ConfigCheckError(ErrorCode.MISSING_FILE, f"{self.config_path.name} not found")

        logger.debug("reading %s", self.config_path)
        try:
            text = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigCheckError(
                ErrorCode.MALFORMED_CONFIG, f"could not read {self.config_path.name}: {exc}"
            ) from exc

        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            raise ConfigCheckError(
                ErrorCode.MALFORMED_CONFIG, f"{self.config_path.name} is not valid JSON: {exc}"
            ) from exc

    @staticmethod
    def require_primary(config: Any) -> Any:
        primary = dig(config, "mcpServers", PRIMARY_SERVER)
        if not is_truthy(primary):
            raise ConfigCheckError(ErrorCode.MISSING_SERVER_SECTION, "Context7 server configuration missing")
        return primary

    @staticmethod
    def require_fields(primary: Any) -> None:
        # Falsy values count as missing: "" and null fail, [] and {} pass.
        for name in REQUIRED_FIELDS:
            if not is_truthy(dig(primary, name)):
                raise ConfigCheckError(
                    ErrorCode.MISSING_FIELD,
                    f"Missing required field: {name}",
                    field=name,
                )

    @staticmethod
    def read_capabilities(settings: Any) -> dict[str, bool]:
        return {flag: is_truthy(dig(settings, "capabilities", flag)) for flag in CAPABILITY_FLAGS}

    @staticmethod
    def read_integration(settings: Any) -> IntegrationStatus:
        backend = dig(settings, "integration", "storage", "backend")
        if not is_truthy(backend):
            backend = None
        elif not isinstance(backend, str):
            backend = json.dumps(backend)

        return IntegrationStatus(
            zenoh=is_truthy(dig(settings, "integration", "zenoh", "enabled")),
            crdt=is_truthy(dig(settings, "integration", "crdt", "enabled")),
            storage_backend=backend,
        )

    @staticmethod
    def list_servers(config: Any) -> list[ServerStatus]:
        servers = dig(config, "mcpServers", default={})
        if not isinstance(servers, Mapping):
            return []
        return [
            ServerStatus(name=name, has_command=is_truthy(dig(entry, "command")))
            for name, entry in servers.items()
            if name != PRIMARY_SERVER
        ]

    def probe_env(self) -> EnvStatus:
        return probe_env_file(self.env_path)
