"""
AnkiConnect connection settings.

Settings are an explicit value handed to the client. Defaults match a local
Anki with the AnkiConnect add-on; environment variables and CLI flags override
them.
"""
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from anki_validator.core.errors import ConfigurationError

DEFAULT_URL = "http://localhost:8765"
DEFAULT_API_VERSION = 6
# guiBrowse takes a search string; longer "nid:... or ..." queries get rejected by Anki.
DEFAULT_BROWSE_LIMIT = 997

ENV_VARS = {
    "url": "ANKI_CONNECT_URL",
    "version": "ANKI_CONNECT_VERSION",
    "timeout_seconds": "ANKI_CONNECT_TIMEOUT",
    "browse_limit": "ANKI_BROWSE_LIMIT",
}


class AnkiConnectConfig(BaseModel):
    """
    Connection settings for the AnkiConnect add-on.

    Attributes:
        url: Endpoint of the AnkiConnect HTTP server
        version: AnkiConnect API version sent with every request
        timeout_seconds: Timeout for a single request
        browse_limit: Maximum number of notes opened in the browser at once
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(DEFAULT_URL, min_length=1)
    version: int = Field(DEFAULT_API_VERSION, ge=1)
    timeout_seconds: float = Field(30.0, gt=0)
    browse_limit: int = Field(DEFAULT_BROWSE_LIMIT, ge=1)

    @classmethod
    def from_env(cls, **overrides) -> "AnkiConnectConfig":
        """
        Build settings from environment variables.

        Reads ANKI_CONNECT_URL, ANKI_CONNECT_VERSION, ANKI_CONNECT_TIMEOUT and
        ANKI_BROWSE_LIMIT. Keyword overrides that are not None win over the
        environment.

        Raises:
            ConfigurationError: If a value cannot be used
        """
        values = {}
        for field_name, env_var in ENV_VARS.items():
            raw = os.getenv(env_var, "").strip()
            if raw:
                values[field_name] = raw
        values.update({key: value for key, value in overrides.items() if value is not None})

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid AnkiConnect settings: {e}") from e
