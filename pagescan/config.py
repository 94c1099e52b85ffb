"""Configuration constants for pagescan."""

import os

from pydantic import BaseModel, ConfigDict


def _env_flag(name: str) -> bool | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Entity output encoding: multi-byte UTF-8, or a single Latin-1 byte.
# Override via PAGESCAN_UTF8; otherwise follow the locale in LANG (read once).
_utf8_override = _env_flag("PAGESCAN_UTF8")
UTF8_OUTPUT = (
    _utf8_override
    if _utf8_override is not None
    else "UTF-8" in os.getenv("LANG", "").upper()
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level(value: str | None) -> str:
    """Normalize a level name; unknown names fall back to WARNING."""
    name = (value or "").strip().upper()
    return name if name in LOG_LEVELS else "WARNING"


LOG_LEVEL = log_level(os.getenv("PAGESCAN_LOG_LEVEL"))
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# Report versioning
PARSER_VERSION = "0.1.0"
SCHEMA_VERSION = 1


class ScanOptions(BaseModel):
    """Options threaded through the text tokenizer and extraction."""

    model_config = ConfigDict(frozen=True)

    utf8: bool = UTF8_OUTPUT

    @property
    def encoding(self) -> str:
        """Codec that decodes tokenizer output to ``str``."""
        return "utf-8" if self.utf8 else "latin-1"

    @classmethod
    def from_env(cls) -> "ScanOptions":
        return cls(utf8=UTF8_OUTPUT)
