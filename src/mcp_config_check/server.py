from __future__ import annotations

import json
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mcp_config_check.errors import ConfigCheckError
from mcp_config_check.report import render_report
from mcp_config_check.validator import ConfigValidator


def _plain_dict(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: str(value) if isinstance(value, Path) else value for key, value in items}


class ConfigCheckServer:
    """Thin wrapper exposing the validator as a JSON-friendly tool handler."""

    def validate(self, config_path: str | None = None) -> dict[str, Any]:
        report = ConfigValidator(config_path).validate()
        return {
            "valid": True,
            "report": asdict(report, dict_factory=_plain_dict),
            "text": "\n".join(render_report(report)),
        }


class ResponseFormat(str, Enum):
    JSON = "json"
    MARKDOWN = "markdown"


class ValidateConfigInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    config_path: str | None = Field(
        default=None,
        min_length=1,
        description="Path to mcp.json. Defaults to mcp.json in the server's working directory.",
    )
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON)


def _as_markdown(data: Any) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, dict) and "text" in data:
        return "```text\n" + data["text"] + "\n```"
    return "```json\n" + json.dumps(data, ensure_ascii=False, indent=2, default=str) + "\n```"


def _tool_success(data: Any, response_format: ResponseFormat = ResponseFormat.JSON) -> dict[str, Any]:
    if response_format == ResponseFormat.MARKDOWN:
        return {
            "ok": True,
            "format": response_format.value,
            "markdown": _as_markdown(data),
            "data": data,
        }
    return {"ok": True, "format": response_format.value, "data": data}


def _tool_error(exc: Exception, response_format: ResponseFormat = ResponseFormat.JSON) -> dict[str, Any]:
    error_payload: dict[str, Any]
    if isinstance(exc, ConfigCheckError):
        error_payload = {
            "code": exc.code.value,
            "message": exc.message,
            "field": exc.field,
            "next_step": "Fix mcp.json (file location, JSON syntax or the context7 entry) and validate again.",
        }
    else:
        error_payload = {
            "code": "INTERNAL_ERROR",
            "message": f"{type(exc).__name__}: {exc}",
            "next_step": "Inspect server logs and check that the config path is readable.",
        }

    if response_format == ResponseFormat.MARKDOWN:
        md = (
            f"### Error `{error_payload['code']}`\n\n"
            f"{error_payload['message']}\n\n"
            f"Next step: {error_payload['next_step']}"
        )
        return {
            "ok": False,
            "format": response_format.value,
            "markdown": md,
            "error": error_payload,
        }

    return {"ok": False, "format": response_format.value, "error": error_payload}


def build_mcp_app(server: ConfigCheckServer | None = None) -> Any:
    """Build FastMCP app lazily so the CLI runs without the MCP SDK imported."""
    try:
        from mcp.server.fastmcp import FastMCP
        from mcp.types import ToolAnnotations
    except ModuleNotFoundError as exc:
        raise RuntimeError(
            "MCP SDK is not installed. Install dependencies first: `python -m pip install -e .`."
        ) from exc

    server = server or ConfigCheckServer()
    mcp = FastMCP("mcp_config_check")

    @mcp.tool(
        name="mcp_config_validate",
        annotations=ToolAnnotations(
            title="Validate MCP Configuration",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    def mcp_config_validate(params: ValidateConfigInput) -> dict[str, Any]:
        """Check the context7 entry of mcp.json and report capabilities, integrations and .env status."""
        try:
            data = server.validate(config_path=params.config_path)
            return _tool_success(data, response_format=params.response_format)
        except Exception as exc:  # noqa: BLE001
            return _tool_error(exc, response_format=params.response_format)

    return mcp


def main() -> None:
    app = build_mcp_app()
    app.run()


if __name__ == "__main__":
    main()
