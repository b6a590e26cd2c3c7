"""
Pytest configuration and fixtures for anki-validator tests

This module provides shared fixtures for unit and integration tests. No test
talks to a real Anki: FakeAnkiConnect stands in for the AnkiConnect client.
"""
import json
from pathlib import Path

import pytest

from anki_validator.core.models import NoteInfo
from anki_validator.observability.logger import APP_LOGGER_NAME, setup_logger


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the pipeline or CLI end to end against a fake Anki"
    )


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Restore the default log handler after tests that reconfigure logging"""
    yield
    setup_logger(APP_LOGGER_NAME)


# =======================
# FAKE ANKICONNECT
# =======================

class FakeAnkiConnect:
    """
    In-memory replacement for AnkiConnectClient.

    Records every call so tests can assert on the order and arguments of
    remote operations.
    """

    def __init__(self, models: dict[str, int], fields: dict[str, list[str]], notes: list[NoteInfo]):
        self.models = models
        self.fields = fields
        self.notes = notes
        self.calls: list[tuple] = []
        self.browsed: list[list[int]] = []

    def model_names_and_ids(self) -> dict[str, int]:
        self.calls.append(("modelNamesAndIds",))
        return dict(self.models)

    def model_field_names(self, model_name: str) -> list[str]:
        self.calls.append(("modelFieldNames", model_name))
        return list(self.fields[model_name])

    def find_notes(self, query: str) -> list[int]:
        self.calls.append(("findNotes", query))
        return [note.note_id for note in self.notes]

    def notes_info(self, note_ids) -> list[NoteInfo]:
        self.calls.append(("notesInfo", list(note_ids)))
        wanted = set(note_ids)
        return [note for note in self.notes if note.note_id in wanted]

    def gui_browse(self, note_ids) -> None:
        self.calls.append(("guiBrowse", list(note_ids)))
        self.browsed.append(list(note_ids))

    def actions(self) -> list[str]:
        return [call[0] for call in self.calls]


# =======================
# FACTORIES
# =======================

@pytest.fixture
def make_note():
    """Factory building a NoteInfo the way AnkiConnect's notesInfo returns it."""
    def _make(note_id: int, fields: dict[str, str], model_name: str = "Basic") -> NoteInfo:
        return NoteInfo.model_validate(
            {
                "noteId": note_id,
                "modelName": model_name,
                "tags": [],
                "fields": {
                    name: {"value": value, "order": order}
                    for order, (name, value) in enumerate(fields.items())
                },
            }
        )

    return _make


@pytest.fixture
def make_fake_anki():
    """Factory for FakeAnkiConnect with a single "Basic" note type by default."""
    def _make(
        *,
        notes: list[NoteInfo] | None = None,
        models: dict[str, int] | None = None,
        fields: dict[str, list[str]] | None = None,
    ) -> FakeAnkiConnect:
        return FakeAnkiConnect(
            models=models if models is not None else {"Basic": 1001},
            fields=fields if fields is not None else {"Basic": ["Front", "Back", "Tags"]},
            notes=notes or [],
        )

    return _make


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory writing a config dict to a JSON file and returning its path."""
    def _write(data: dict, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def basic_config_data() -> dict:
    """Config for the "Basic" note type covering all three rule kinds."""
    return {
        "note_type": "Basic",
        "field_validations": {
            "Front": [{"type": "Required"}],
            "Back": [
                {"type": "Required"},
                {"type": "MustNotInclude", "check": "TODO"},
            ],
            "Tags": [{"type": "ValueList", "check": ["grammar", "vocab"]}],
        },
    }
