"""Main module for the db_bootstrap package."""
import logging
import sys
from typing import Optional, TextIO

from dotenv import load_dotenv

from .config import (
    DATA_LOAD_PATH,
    DEBUG_ENV,
    DEFAULT_STATEMENT_NAME,
    INIT_SQL_PATH,
    LOGGER_NAME,
    LOGGING_PATH,
    PROPERTIES_PATH,
    RESOURCES_DIR_ENV,
    STATEMENT_NAME_ENV,
    STATEMENTS_PATH,
    env_flag,
    get_env_or_default,
)
from .properties import ConnectionParameters, load_properties
from .resource_loader import ResourceLoader
from .secure_logging import configure_secure_logging, get_secure_logger
from .sql_interface.db_interface import SQLInterface
from .sql_interface.output_formatter import OutputFormatter
from .sql_interface.query_manager import QueryManager

logger = get_secure_logger(LOGGER_NAME)


def configure_logging(loader: ResourceLoader, debug: bool = False) -> None:
    """Configure process-wide logging from the bundled logging.conf."""
    with loader.open_text(LOGGING_PATH) as stream:
        configure_secure_logging(stream, production_mode=not debug)
    if debug:
        logging.getLogger("db_bootstrap").setLevel(logging.DEBUG)


def run(loader: ResourceLoader, statement_name: str = DEFAULT_STATEMENT_NAME,
        stream: Optional[TextIO] = None, debug: bool = False) -> int:
    """
    Bootstrap the database and print the configured report.

    Loads the connection and statement properties, creates the schema, loads
    the seed data and prints every row of the named statement. Errors
    propagate to the caller.

    Args:
        loader (ResourceLoader): Source of property files and SQL scripts.
        statement_name (str): Logical name of the statement to report.
        stream (Optional[TextIO]): Where rows are written, standard output by default.
        debug (bool): Verbose connection handling.

    Returns:
        int: Number of rows printed.
    """
    parameters = ConnectionParameters.from_properties(load_properties(loader, PROPERTIES_PATH))
    query_manager = QueryManager.from_resources(loader, STATEMENTS_PATH)
    logger.debug(f"Connection parameters: {parameters!r}")

    with SQLInterface(parameters, debug=debug) as db:
        db.run_schema(loader.read_as_text(INIT_SQL_PATH))
        db.run_seed(loader.read_as_text(DATA_LOAD_PATH))

        definition = query_manager.get_statement(statement_name)
        with db.execute_query(definition.statement) as cursor:
            return OutputFormatter.print_rows(cursor, definition, stream=stream)


def main() -> None:
    """
    Command-line entry point. Takes no arguments.

    Every failure is caught here once and logged; the process ends normally
    either way.
    """
    load_dotenv()
    debug = env_flag(DEBUG_ENV)
    try:
        loader = ResourceLoader(get_env_or_default(RESOURCES_DIR_ENV) or None)
        configure_logging(loader, debug=debug)
        statement_name = get_env_or_default(STATEMENT_NAME_ENV) or DEFAULT_STATEMENT_NAME
        run(loader, statement_name=statement_name, stream=sys.stdout, debug=debug)
    except Exception:
        logger.exception("an unrecoverable exception!")
