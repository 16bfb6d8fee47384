import pytest

from mcp_config_check.errors import ConfigCheckError, ErrorCode
from mcp_config_check.server import ConfigCheckServer, ResponseFormat, ValidateConfigInput, _tool_error, _tool_success


def test_tool_success_json_format():
    out = _tool_success({"x": 1}, response_format=ResponseFormat.JSON)
    assert out["ok"] is True
    assert out["format"] == "json"
    assert out["data"] == {"x": 1}


def test_tool_success_markdown_format_embeds_text_report():
    out = _tool_success({"valid": True, "text": "Capabilities:"}, response_format=ResponseFormat.MARKDOWN)
    assert out["format"] == "markdown"
    assert out["markdown"] == "```text\nCapabilities:\n```"


def test_tool_error_carries_code_and_field():
    err = ConfigCheckError(ErrorCode.MISSING_FIELD, "Missing required field: args", field="args")
    out = _tool_error(err)
    assert out["ok"] is False
    assert out["error"]["code"] == "MISSING_FIELD"
    assert out["error"]["field"] == "args"


def test_tool_error_markdown_format_contains_next_step():
    out = _tool_error(ValueError("boom"), response_format=ResponseFormat.MARKDOWN)
    assert out["ok"] is False
    assert "INTERNAL_ERROR" in out["markdown"]
    assert "Next step:" in out["markdown"]


def test_server_validate_returns_plain_report(write_config):
    path = write_config({"mcpServers": {"context7": {"command": "x", "args": ["a"], "env": {}, "settings": {}}}})
    out = ConfigCheckServer().validate(str(path))
    assert out["valid"] is True
    assert out["report"]["config_path"] == str(path)
    assert out["report"]["env"]["present"] is False
    assert "Storage: not configured" in out["text"]


def test_input_model_rejects_unknown_fields():
    with pytest.raises(ValueError):
        ValidateConfigInput(config_path="mcp.json", extra_field=1)


def test_build_mcp_app_registers_server_name():
    pytest.importorskip("mcp")
    from mcp_config_check.server import build_mcp_app

    app = build_mcp_app()
    assert app.name == "mcp_config_check"
