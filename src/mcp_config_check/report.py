from __future__ import annotations

from mcp_config_check.errors import ConfigCheckError
from mcp_config_check.models import ENV_EXAMPLE_FILENAME, ValidationReport

OK = "✓"
FAIL = "✗"
WARN = "⚠"

ACTIVATION_STEPS = (
    "Ensure .env is configured with your API keys",
    "Restart Claude Code to load the MCP configuration",
    "The Context7 server will be available in your Claude Code session",
)


def _mark(value: bool) -> str:
    return OK if value else FAIL


def render_header() -> list[str]:
    return ["Validating MCP Configuration for ELFI Context7...", ""]


def render_report(report: ValidationReport) -> list[str]:
    caps = report.capabilities
    integration = report.integration
    lines = [
        f"{OK} Context7 server configuration valid",
        "",
        "Capabilities:",
        f"  Tools: {_mark(caps['tools'])}",
        f"  Resources: {_mark(caps['resources'])}",
        f"  Prompts: {_mark(caps['prompts'])}",
        f"  Sampling: {_mark(caps['sampling'])}",
        "",
        "Integrations:",
        f"  Zenoh: {_mark(integration.zenoh)}",
        f"  CRDT: {_mark(integration.crdt)}",
        f"  Storage: {integration.storage_backend or 'not configured'}",
        "",
        "Additional MCP Servers:",
    ]
    lines.extend(f"  {server.name}: {_mark(server.has_command)}" for server in report.servers)

    lines += ["", "Environment Configuration:"]
    env_name = report.env.path.name
    if report.env.present:
        key_status = f"{OK} configured" if report.env.api_key_configured else f"{WARN} needs configuration"
        lines.append(f"  {env_name} file: {OK}")
        lines.append(f"  Context7 API key: {key_status}")
    else:
        lines.append(f"  {env_name} file: {FAIL} (copy from {ENV_EXAMPLE_FILENAME})")

    lines += ["", "✅ MCP configuration validation complete!", "", "To activate:"]
    lines.extend(f"{index}. {step}" for index, step in enumerate(ACTIVATION_STEPS, start=1))
    return lines


def render_failure(error: ConfigCheckError) -> str:
    return f"\n{FAIL} Validation failed: {error.message}"
