"""
Schema reconciliation between a validation config and the live collection.

Resolves the configured note type against the note types Anki reports and
checks that every configured field exists on it, before any note is fetched.
"""

from anki_validator.core.errors import ReconciliationError, quote_names
from anki_validator.core.models import NoteModel, ValidationConfig
from anki_validator.observability.logger import get_logger

logger = get_logger(__name__)


class SchemaReconciler:
    """
    Pre-flight check of a config against the note type schema.

    Every unknown field is collected and reported in a single error, so a
    config with several typos is fixed in one pass.
    """

    def __init__(self, client):
        """
        Initialize the reconciler.

        Args:
            client: Transport exposing model_names_and_ids() and model_field_names()
        """
        self.client = client

    def resolve_model(self, config: ValidationConfig) -> NoteModel:
        """
        Find the note type selected by the config.

        Args:
            config: The validation config

        Returns:
            The matching note type

        Raises:
            ReconciliationError: If no note type matches the selector
        """
        models = self.client.model_names_and_ids()

        for name, model_id in models.items():
            if config.note_type is not None and name == config.note_type:
                return NoteModel(name=name, model_id=model_id)
            if config.model_id is not None and model_id == config.model_id:
                return NoteModel(name=name, model_id=model_id)

        raise ReconciliationError(
            f"Failed to find a note type with {config.selector_description}"
        )

    def reconcile(self, config: ValidationConfig) -> NoteModel:
        """
        Resolve the note type and verify the configured fields exist on it.

        Args:
            config: The (filtered) validation config

        Returns:
            The resolved note type

        Raises:
            ReconciliationError: If the note type is unknown, or if any
                configured field is missing (all missing fields are listed)
        """
        model = self.resolve_model(config)
        field_names = set(self.client.model_field_names(model.name))

        missing_fields = [f for f in config.field_validations if f not in field_names]
        if missing_fields:
            raise ReconciliationError(
                f"The note type '{model.name}' does not have these fields: {quote_names(missing_fields)}",
                missing_fields=missing_fields,
            )

        logger.info(
            f"Config matches note type '{model.name}' ({model.model_id}) "
            f"with {len(config.field_validations)} validated fields"
        )
        return model
