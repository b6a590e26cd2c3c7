"""
AnkiConnect HTTP client.

Wraps the JSON-over-HTTP actions of the AnkiConnect add-on used by the
validator. Each call is a single POST; there are no retries.
"""
from collections.abc import Sequence
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from anki_validator.core.models import NoteInfo
from anki_validator.observability.logger import get_logger

from .config import AnkiConnectConfig
from .errors import (
    AnkiConnectApplicationError,
    AnkiConnectHttpError,
    AnkiConnectProtocolError,
)

logger = get_logger(__name__)

_NOTE_IDS = TypeAdapter(list[int])
_MODEL_IDS = TypeAdapter(dict[str, int])
_FIELD_NAMES = TypeAdapter(list[str])
_NOTES = TypeAdapter(list[NoteInfo])


class AnkiConnectClient:
    """
    Client for the AnkiConnect add-on.

    Usage:
        with AnkiConnectClient(AnkiConnectConfig.from_env()) as client:
            note_ids = client.find_notes("mid:1001")
    """

    def __init__(self, config: AnkiConnectConfig, session: requests.Session | None = None):
        """
        Initialize the client.

        Args:
            config: Connection settings
            session: HTTP session to use (a new one is created if omitted)
        """
        self.config = config
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "AnkiConnectClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def invoke(self, action: str, params: dict[str, Any] | None = None) -> Any:
        """
        Call an AnkiConnect action and return its result.

        Args:
            action: AnkiConnect action name
            params: Action parameters, omitted from the request when None

        Returns:
            The decoded "result" value

        Raises:
            AnkiConnectHttpError: On connection failure or non-success status
            AnkiConnectProtocolError: If the reply is not a valid AnkiConnect reply
            AnkiConnectApplicationError: If Anki reports an error
        """
        payload: dict[str, Any] = {"action": action, "version": self.config.version}
        if params is not None:
            payload["params"] = params

        logger.debug(f"Invoking AnkiConnect action {action}", extra={"action": action})
        try:
            response = self.session.post(
                self.config.url,
                json=payload,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise AnkiConnectHttpError(action, f"request: {e}") from e

        if not response.ok:
            raise AnkiConnectHttpError(
                action,
                f"status code {response.status_code}",
                status=response.status_code,
                body=response.text,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise AnkiConnectProtocolError(action, f"json parse error: {e}") from e

        if not isinstance(body, dict):
            raise AnkiConnectProtocolError(action, "reply is not a JSON object")

        error = body.get("error")
        if error is not None:
            raise AnkiConnectApplicationError(action, str(error))

        result = body.get("result")
        if result is None:
            raise AnkiConnectProtocolError(action, "Anki returned without a result value")
        return result

    def _invoke_as(self, adapter: TypeAdapter, action: str, params: dict[str, Any] | None = None):
        result = self.invoke(action, params)
        try:
            return adapter.validate_python(result)
        except ValidationError as e:
            raise AnkiConnectProtocolError(action, f"unexpected result: {e}") from e

    def find_notes(self, query: str) -> list[int]:
        """Return the ids of notes matching an Anki search query."""
        return self._invoke_as(_NOTE_IDS, "findNotes", {"query": query})

    def model_names_and_ids(self) -> dict[str, int]:
        """Return every note type name with its model id."""
        return self._invoke_as(_MODEL_IDS, "modelNamesAndIds")

    def model_field_names(self, model_name: str) -> list[str]:
        """Return the field names of a note type, in field order."""
        return self._invoke_as(_FIELD_NAMES, "modelFieldNames", {"modelName": model_name})

    def notes_info(self, note_ids: Sequence[int]) -> list[NoteInfo]:
        """Fetch the notes with the given ids."""
        if not note_ids:
            return []
        return self._invoke_as(_NOTES, "notesInfo", {"notes": list(note_ids)})

    def gui_browse(self, note_ids: Sequence[int]) -> None:
        """
        Open the given notes in Anki's card browser.

        Raises:
            ValueError: If more ids are given than config.browse_limit allows
        """
        if len(note_ids) > self.config.browse_limit:
            raise ValueError(
                f"Cannot browse {len(note_ids)} notes at once, the limit is {self.config.browse_limit}"
            )
        if not note_ids:
            return

        query = " or ".join(f"nid:{note_id}" for note_id in note_ids)
        self.invoke("guiBrowse", {"query": query})
