"""
Validation pipeline orchestration.

Coordinates the flow: reconcile → find notes → fetch notes → validate → (browse)
"""

from collections.abc import Sequence

from anki_validator.connect.config import DEFAULT_BROWSE_LIMIT
from anki_validator.core.models import NoteModel, ValidationConfig, ValidationResult
from anki_validator.core.rules import RuleEngine
from anki_validator.core.schema import SchemaReconciler
from anki_validator.observability.logger import get_logger, log_operation

logger = get_logger(__name__)


def build_note_query(model: NoteModel) -> str:
    """
    Build the Anki search query selecting every note of a resolved note type.

    Notes are always selected by model id: "note:" searches treat * and _ as
    wildcards and would match other note types.
    """
    return f"mid:{model.model_id}"


class ValidationPipeline:
    """
    Orchestrates one validation run against a live collection.

    Flow:
    1. Reconcile the config with the note type schema
    2. Find the notes of the note type
    3. Fetch their field values
    4. Apply the rules and aggregate failures
    """

    def __init__(self, client):
        """
        Initialize the pipeline.

        Args:
            client: AnkiConnect client (or any object with the same methods)
        """
        self.client = client
        self.reconciler = SchemaReconciler(client)

    def run(self, config: ValidationConfig) -> ValidationResult:
        """
        Validate every note of the configured note type.

        Args:
            config: The filtered validation config

        Returns:
            ValidationResult for the run

        Raises:
            ReconciliationError: If the config does not match the collection
            NoteFieldMismatchError: If a fetched note lacks a configured field
            AnkiConnectError: If any remote call fails
        """
        with log_operation("Reconciling config", logger=logger):
            model = self.reconciler.reconcile(config)

        engine = RuleEngine(config, note_type=model.name)
        logger.info(f"Rule summary: {engine.get_rule_summary()}")

        query = build_note_query(model)
        with log_operation("Finding notes", logger=logger, query=query):
            note_ids = self.client.find_notes(query)
        logger.info(f"Found {len(note_ids)} notes of type '{model.name}'")

        with log_operation("Fetching notes", logger=logger, note_count=len(note_ids)):
            notes = self.client.notes_info(note_ids)

        result = engine.run(notes)
        if result.passed:
            logger.info(f"Validation complete: all {result.total_note_count} notes passed")
        else:
            logger.info(
                f"Validation complete: {result.total_note_count} notes, "
                f"{result.failed_note_count} failed"
            )
        return result

    def browse_failures(
        self,
        result: ValidationResult,
        limit: int = DEFAULT_BROWSE_LIMIT,
    ) -> Sequence[int]:
        """
        Open the failed notes in Anki's browser.

        Args:
            result: Result of a validation run
            limit: Maximum number of notes to open

        Returns:
            The note ids that were sent to the browser
        """
        note_ids = result.failed_note_ids[:limit]
        if not note_ids:
            logger.info("No failed notes to browse")
            return []

        if result.failed_note_count > limit:
            logger.warning(
                f"Only the first {limit} of {result.failed_note_count} failed notes will be browsed"
            )

        with log_operation("Opening browser", logger=logger, note_count=len(note_ids)):
            self.client.gui_browse(note_ids)
        return note_ids
