"""
Errors raised by the AnkiConnect client.

Every error names the AnkiConnect action that failed.
"""


class AnkiConnectError(RuntimeError):
    """Base class for failures talking to AnkiConnect."""

    def __init__(self, action: str, message: str):
        self.action = action
        super().__init__(f"AnkiConnect action '{action}' failed: {message}")


class AnkiConnectHttpError(AnkiConnectError):
    """Connection failure, timeout, or non-success HTTP status."""

    def __init__(self, action: str, message: str, status: int | None = None, body: str | None = None):
        super().__init__(action, f"http error: {message}")
        self.status = status
        self.body = body


class AnkiConnectProtocolError(AnkiConnectError):
    """Response body that is not a well-formed AnkiConnect reply."""
    pass


class AnkiConnectApplicationError(AnkiConnectError):
    """Error reported by Anki itself, passed through verbatim."""

    def __init__(self, action: str, error: str):
        super().__init__(action, f"Anki error: {error}")
        self.error = error
