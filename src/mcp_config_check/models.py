from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PRIMARY_SERVER = "context7"
REQUIRED_FIELDS = ("command", "args", "env", "settings")
CAPABILITY_FLAGS = ("tools", "resources", "prompts", "sampling")

API_KEY_NAME = "CONTEXT7_API_KEY"
API_KEY_PLACEHOLDER = "your_context7_api_key_here"

DEFAULT_CONFIG_FILENAME = "mcp.json"
DEFAULT_ENV_FILENAME = ".env"
ENV_EXAMPLE_FILENAME = ".env.example"


@dataclass(slots=True)
class IntegrationStatus:
    zenoh: bool = False
    crdt: bool = False
    storage_backend: str | None = None


@dataclass(slots=True)
class ServerStatus:
    name: str
    has_command: bool


@dataclass(slots=True)
class EnvStatus:
    path: Path
    present: bool
    # None when the file is absent and the key was never inspected.
    api_key_configured: bool | None = None


@dataclass
class ValidationReport:
    config_path: Path
    capabilities: dict[str, bool]
    integration: IntegrationStatus
    env: EnvStatus
    servers: list[ServerStatus] = field(default_factory=list)
