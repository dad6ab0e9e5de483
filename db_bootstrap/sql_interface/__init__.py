"""SQL interface package for db-bootstrap."""

import logging

from .db_interface import SQLInterface
from .exceptions import (
    BootstrapError,
    DatabaseConnectionError,
    ExtractionError,
    InvalidStatementError,
    QueryExecutionError,
    ResourceNotFoundError,
    SchemaExecutionError,
    SeedExecutionError,
)
from .extraction import CursorState, ExtractionStrategy, ResultCursor, extract_row, parse_strategies
from .output_formatter import OutputFormatter
from .query_manager import QueryManager, StatementDefinition
from .seed import split_seed_script

# Initialize package logger
logger = logging.getLogger(__name__)

__all__ = [
    "SQLInterface",
    "QueryManager",
    "StatementDefinition",
    "OutputFormatter",
    "ExtractionStrategy",
    "ResultCursor",
    "CursorState",
    "extract_row",
    "parse_strategies",
    "split_seed_script",
    "BootstrapError",
    "ResourceNotFoundError",
    "DatabaseConnectionError",
    "SchemaExecutionError",
    "SeedExecutionError",
    "QueryExecutionError",
    "ExtractionError",
    "InvalidStatementError",
]

logger.debug("SQL interface package initialized")
