from pathlib import Path

from mcp_config_check.errors import ConfigCheckError, ErrorCode
from mcp_config_check.models import REQUIRED_FIELDS, EnvStatus, IntegrationStatus


def test_required_fields_order_is_fixed():
    assert REQUIRED_FIELDS == ("command", "args", "env", "settings")


def test_default_integration_status_is_unconfigured():
    status = IntegrationStatus()
    assert status.zenoh is False
    assert status.crdt is False
    assert status.storage_backend is None


def test_absent_env_status_has_no_key_verdict():
    status = EnvStatus(path=Path(".env"), present=False)
    assert status.api_key_configured is None


def test_error_code_serialization():
    err = ConfigCheckError(ErrorCode.MISSING_FIELD, "Missing required field: args", field="args")
    assert err.code.value == "MISSING_FIELD"
    assert str(err) == "MISSING_FIELD: Missing required field: args"
    assert err.field == "args"
