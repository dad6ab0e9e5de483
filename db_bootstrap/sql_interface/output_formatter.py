import sys
from typing import Any, Optional, Sequence, TextIO

from ..config import LINE_SEPARATOR_TOKEN, NULL_TEXT
from ..secure_logging import get_secure_logger
from .exceptions import ExtractionError, InvalidStatementError
from .extraction import ResultCursor, extract_row

logger = get_secure_logger(__name__)


class OutputFormatter:
    """Renders extracted rows through a statement's printf-style format template."""

    @staticmethod
    def _translate_template(template: str) -> str:
        """
        Replace the %n line separator token with a newline.

        '%%' pairs are left alone so that '%%n' stays a literal '%n'.
        """
        parts = template.split("%%")
        return "%%".join(part.replace(LINE_SEPARATOR_TOKEN, "\n") for part in parts)

    @staticmethod
    def format_row(template: Optional[str], values: Sequence[Any]) -> str:
        """
        Render one row by passing its values as the positional arguments of a template.

        Args:
            template (Optional[str]): printf-style template, e.g. '%d %s%n'.
            values (Sequence[Any]): Extracted values, in column order.

        Returns:
            str: The rendered line, including any separator the template asks for.
                A None value is written as 'null'.

        Raises:
            InvalidStatementError: If there is no template.
            ExtractionError: If the template does not accept the values.
        """
        if template is None:
            raise InvalidStatementError("statement has no output format")
        try:
            arguments = tuple(NULL_TEXT if value is None else value for value in values)
            return OutputFormatter._translate_template(template) % arguments
        except (TypeError, ValueError, KeyError) as e:
            raise ExtractionError(f"row values do not fit the output format: {e}") from e

    @staticmethod
    def print_rows(cursor: ResultCursor, definition, stream: Optional[TextIO] = None) -> int:
        """
        Drive a result cursor to exhaustion, writing one rendered line per row.

        Args:
            cursor (ResultCursor): Freshly executed query cursor.
            definition (StatementDefinition): Supplies the strategies and format.
            stream (Optional[TextIO]): Output stream, standard output by default.

        Returns:
            int: Number of rows written.
        """
        out = stream if stream is not None else sys.stdout
        strategies = definition.strategies()
        written = 0
        while cursor.advance():
            out.write(OutputFormatter.format_row(definition.format, extract_row(cursor, strategies)))
            out.flush()
            written += 1
        logger.debug(f"Printed {written} rows for '{definition.name}'")
        return written
