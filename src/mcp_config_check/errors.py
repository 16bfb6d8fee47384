from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    MISSING_FILE = "MISSING_FILE"
    MALFORMED_CONFIG = "MALFORMED_CONFIG"
    MISSING_SERVER_SECTION = "MISSING_SERVER_SECTION"
    MISSING_FIELD = "MISSING_FIELD"


@dataclass
class ConfigCheckError(Exception):
    code: ErrorCode
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
