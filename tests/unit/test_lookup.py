import pytest

from mcp_config_check.lookup import dig, is_truthy


def test_dig_reads_nested_value():
    assert dig({"a": {"b": {"c": 3}}}, "a", "b", "c") == 3


def test_dig_returns_default_on_missing_segment():
    assert dig({"a": {}}, "a", "b", "c") is None
    assert dig({"a": {}}, "a", "b", default="x") == "x"


def test_dig_stops_at_non_mapping():
    assert dig({"a": [1, 2]}, "a", "b") is None
    assert dig(None, "a") is None
    assert dig("text", "a", default=0) == 0


def test_dig_keeps_explicit_null():
    assert dig({"a": None}, "a", default="x") is None


@pytest.mark.parametrize("value", [None, False, 0, 0.0, float("nan"), ""])
def test_falsy_values(value):
    assert is_truthy(value) is False


@pytest.mark.parametrize("value", [True, 1, -1, 0.5, "no", [], {}, ["a"], {"k": "v"}])
def test_truthy_values(value):
    assert is_truthy(value) is True
