"""
Plain-text rendering of a validation result.
"""

import sys
from typing import TextIO

from anki_validator.core.models import ValidationResult

NOTE_ID_WIDTH = 20
NOTE_ID_HEADER = "Note Id"
FIELD_NAME_HEADER = "Field Name"
ERROR_MESSAGE_HEADER = "Error Message"


def format_summary(result: ValidationResult) -> str:
    return (
        f"{result.total_note_count} notes have been validated, "
        f"{result.failed_note_count} notes failed"
    )


def format_validation_result(result: ValidationResult) -> str:
    """
    Render the failures as a table followed by a summary line.

    Column widths follow the longest field name and message present, and are
    never narrower than the column headers.
    """
    rows = [
        (note_id, field_name, rule.message())
        for note_id, failures in result.validation_errors.items()
        for field_name, rule in failures.items()
    ]
    field_width = max([len(FIELD_NAME_HEADER)] + [len(field_name) for _, field_name, _ in rows])
    message_width = max([len(ERROR_MESSAGE_HEADER)] + [len(message) for _, _, message in rows])

    separator = f"|-{'-' * NOTE_ID_WIDTH}-|-{'-' * field_width}-|-{'-' * message_width}-|"
    lines = [
        separator,
        f"| {NOTE_ID_HEADER:<{NOTE_ID_WIDTH}} | {FIELD_NAME_HEADER:<{field_width}} "
        f"| {ERROR_MESSAGE_HEADER:<{message_width}} |",
        separator,
    ]
    for note_id, field_name, message in rows:
        lines.append(
            f"| {note_id:>{NOTE_ID_WIDTH}} | {field_name:<{field_width}} | {message:<{message_width}} |"
        )
    lines.extend([separator, "", format_summary(result)])

    return "\n".join(lines) + "\n"


def print_validation_result(result: ValidationResult, stream: TextIO | None = None) -> None:
    """Write the rendered result to stream (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(format_validation_result(result))
    stream.flush()
