"""AnkiConnect transport (network access lives here; the validation core never imports it)."""

from .client import AnkiConnectClient
from .config import AnkiConnectConfig
from .errors import (
    AnkiConnectApplicationError,
    AnkiConnectError,
    AnkiConnectHttpError,
    AnkiConnectProtocolError,
)

__all__ = [
    "AnkiConnectApplicationError",
    "AnkiConnectClient",
    "AnkiConnectConfig",
    "AnkiConnectError",
    "AnkiConnectHttpError",
    "AnkiConnectProtocolError",
]
