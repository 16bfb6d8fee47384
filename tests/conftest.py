import json

import pytest


@pytest.fixture
def write_config(tmp_path):
    def _write(config, name="mcp.json"):
        path = tmp_path / name
        text = config if isinstance(config, str) else json.dumps(config)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_env(tmp_path):
    def _write(text):
        path = tmp_path / ".env"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
