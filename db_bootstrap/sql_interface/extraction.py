"""Column extraction strategies and the forward-only result cursor they read from."""

from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..config import STRATEGY_SEPARATOR
from ..secure_logging import get_secure_logger
from .exceptions import ExtractionError, InvalidStatementError

logger = get_secure_logger(__name__)


class CursorState(Enum):
    BEFORE_FIRST = "before_first"
    HAS_ROW = "has_row"
    EXHAUSTED = "exhausted"


class ResultCursor:
    """
    Forward-only view over a DB-API cursor with 1-based column access.

    Rows are fetched one at a time; nothing is buffered beyond the current row.
    """

    def __init__(self, cursor: Any, on_close: Optional[Callable[["ResultCursor"], None]] = None):
        self._cursor = cursor
        self._on_close = on_close
        self.closed = False
        self._row: Optional[Sequence[Any]] = None
        self.state = CursorState.BEFORE_FIRST
        self.rows_read = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Release the underlying cursor; the view becomes exhausted. Closing twice is a no-op."""
        if self.closed:
            return
        self.closed = True
        self._row = None
        self.state = CursorState.EXHAUSTED
        try:
            self._cursor.close()
        finally:
            if self._on_close is not None:
                self._on_close(self)

    @property
    def column_count(self) -> int:
        description = self._cursor.description
        return len(description) if description else 0

    @property
    def column_names(self) -> List[str]:
        return [column[0] for column in self._cursor.description or ()]

    def advance(self) -> bool:
        """
        Move to the next row.

        Returns:
            bool: True if a row is now current, False once the cursor is exhausted.
        """
        if self.state is CursorState.EXHAUSTED:
            return False
        row = self._cursor.fetchone()
        if row is None:
            self._row = None
            self.state = CursorState.EXHAUSTED
            logger.debug(f"Result cursor exhausted after {self.rows_read} rows")
            return False
        self._row = row
        self.state = CursorState.HAS_ROW
        self.rows_read += 1
        return True

    def get(self, position: int) -> Any:
        """
        Read the raw value of a column in the current row.

        Args:
            position (int): 1-based column position.

        Raises:
            ExtractionError: If no row is current or the position is out of range.
        """
        if self.state is not CursorState.HAS_ROW:
            raise ExtractionError(f"no current row to read column {position} from (cursor is {self.state.value})")
        if position < 1 or position > len(self._row):
            raise ExtractionError(f"column position {position} out of range 1..{len(self._row)}")
        return self._row[position - 1]


def _to_int(value: Any) -> int:
    # SQL NULL reads as 0, as it does for an integer getter on a JDBC result set
    if value is None:
        return 0
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        value = value.strip()
    return int(value)


def _to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    return float(value)


def _to_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class ExtractionStrategy(Enum):
    """Closed set of column extractors, selected by their tag in configuration."""

    INT = ("INT", _to_int)
    FLOAT = ("FLOAT", _to_float)
    STRING = ("STRING", _to_string)

    def __init__(self, tag: str, converter: Callable[[Any], Any]):
        self.tag = tag
        self.converter = converter

    def extract(self, cursor: ResultCursor, position: int) -> Any:
        """
        Pull a typed value from a column of the current row.

        Args:
            cursor (ResultCursor): Cursor positioned on a row.
            position (int): 1-based column position.

        Raises:
            ExtractionError: If the column cannot be read or converted.
        """
        value = cursor.get(position)
        try:
            return self.converter(value)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise ExtractionError(
                f"column extraction exception: {self.tag} cannot read column {position} "
                f"(value of type {type(value).__name__})"
            ) from e


def parse_strategies(strategy: Optional[str], statement_name: str = "<unnamed>") -> List[ExtractionStrategy]:
    """
    Turn a comma separated list of tags (e.g. 'INT,STRING') into strategies.

    Raises:
        InvalidStatementError: If the list is missing or names an unknown tag.
    """
    if strategy is None:
        raise InvalidStatementError(f"statement '{statement_name}' has no extraction strategy")
    strategies = []
    for tag in strategy.split(STRATEGY_SEPARATOR):
        try:
            strategies.append(ExtractionStrategy[tag.strip()])
        except KeyError:
            raise InvalidStatementError(
                f"statement '{statement_name}' uses unknown extraction strategy '{tag.strip()}'"
            ) from None
    return strategies


def extract_row(cursor: ResultCursor, strategies: Sequence[ExtractionStrategy]) -> Tuple[Any, ...]:
    """
    Assemble the current row as one value per strategy, in strategy order.

    Raises:
        ExtractionError: If the number of strategies differs from the number
            of columns, or if any column fails to convert.
    """
    column_count = cursor.column_count
    if len(strategies) != column_count:
        raise ExtractionError(
            f"{len(strategies)} extraction strategies configured for {column_count} result columns"
        )
    return tuple(strategy.extract(cursor, position) for position, strategy in enumerate(strategies, start=1))
