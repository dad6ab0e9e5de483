"""Database interface module: one connection, schema and seed execution, queries."""

import sqlite3
import time
from typing import Any, List, Optional

try:
    import pyodbc
except ImportError:
    # pyodbc needs the unixODBC runtime; sqlite: URLs work without it
    pyodbc = None

from ..properties import ConnectionParameters
from ..secure_logging import get_secure_logger
from .exceptions import (
    DatabaseConnectionError,
    QueryExecutionError,
    SchemaExecutionError,
    SeedExecutionError,
)
from .extraction import ResultCursor
from .seed import split_seed_script

# Initialize secure logger
logger = get_secure_logger(__name__)

ODBC_SCHEME = "odbc"
SQLITE_SCHEME = "sqlite"
SQLITE_MEMORY = ":memory:"


def split_url(url: Optional[str]):
    """
    Split a connection URL into its driver scheme and the driver-specific remainder.

    'odbc:DRIVER={...};SERVER=...' gives ('odbc', 'DRIVER={...};SERVER=...'),
    'sqlite::memory:' gives ('sqlite', ':memory:').

    Raises:
        DatabaseConnectionError: If the URL is missing or has no scheme.
    """
    if not url:
        raise DatabaseConnectionError("no connection URL configured")
    scheme, sep, target = url.partition(":")
    if not sep or not scheme:
        raise DatabaseConnectionError(f"connection URL has no driver scheme: {scheme or url}")
    return scheme.lower(), target


class SQLInterface:
    """Handles the database connection, script execution, and query cursors."""

    def __init__(self, parameters: ConnectionParameters, debug: bool = False):
        self.parameters = parameters
        self.connection: Optional[Any] = None
        self.debug = debug
        self._cursors: List[ResultCursor] = []

    def __enter__(self):
        """Context manager entry point: establishes connection."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit point: closes cursors and connection."""
        self.close_connection()
        return False

    def _connect_odbc(self, target: str):
        if pyodbc is None:
            raise DatabaseConnectionError("pyodbc not available. Cannot open an ODBC connection.")
        connection_string = target.rstrip(";") + ";"
        if self.parameters.user:
            connection_string += f"UID={self.parameters.user};"
        if self.parameters.password:
            connection_string += f"PWD={self.parameters.password};"
        return pyodbc.connect(connection_string, autocommit=False)

    def _connect_sqlite(self, target: str):
        database = target or SQLITE_MEMORY
        if self.parameters.user or self.parameters.password:
            logger.debug("sqlite connections ignore user and password")
        # The default isolation level opens a transaction before DML, so
        # nothing is persisted until commit()
        return sqlite3.connect(database)

    def connect(self) -> None:
        """
        Opens the database connection with autocommit disabled.

        Raises:
            DatabaseConnectionError: If the URL is unusable or the driver refuses the connection.
        """
        if self.connection is not None:
            logger.warning("Connection object already exists. Close before reconnecting if needed.")
            return

        scheme, target = split_url(self.parameters.url)
        connectors = {
            ODBC_SCHEME: self._connect_odbc,
            SQLITE_SCHEME: self._connect_sqlite,
        }
        if scheme not in connectors:
            raise DatabaseConnectionError(f"unsupported connection URL scheme: {scheme}")

        logger.debug(f"Attempting database connection using the '{scheme}' driver")
        start_time = time.time()
        try:
            self.connection = connectors[scheme](target)
        except DatabaseConnectionError:
            raise
        except Exception as ex:
            duration_ms = (time.time() - start_time) * 1000
            error_type = type(ex).__name__
            logger.log_authentication_event("DB_CONNECT", self.parameters.user, success=False,
                                            details=f"Exception: {error_type}")
            logger.log_database_operation("CONNECT", success=False, duration_ms=duration_ms)
            self.connection = None
            # Driver messages may echo the connection string; keep only the type
            raise DatabaseConnectionError(f"Database connection failed: {error_type}") from None

        duration_ms = (time.time() - start_time) * 1000
        logger.log_authentication_event("DB_CONNECT", self.parameters.user, success=True)
        logger.log_database_operation("CONNECT", success=True, duration_ms=duration_ms)
        logger.info("Database connection established successfully")

    def _require_connection(self, error_type):
        if self.connection is None:
            raise error_type("Not connected to the database.")

    def run_schema(self, ddl_text: str) -> None:
        """
        Executes a DDL script as one statement and commits.

        Args:
            ddl_text (str): The full schema script.

        Raises:
            SchemaExecutionError: If the driver rejects the script. The
                transaction is rolled back first.
        """
        self._require_connection(SchemaExecutionError)
        start_time = time.time()
        cursor = self.connection.cursor()
        try:
            cursor.execute(ddl_text)
            self.connection.commit()
        except Exception as ex:
            logger.log_sql_execution(ddl_text, success=False)
            self._rollback()
            raise SchemaExecutionError(f"schema script failed: {ex}") from ex
        finally:
            cursor.close()

        duration_ms = (time.time() - start_time) * 1000
        logger.log_sql_execution(ddl_text, success=True, duration_ms=duration_ms)
        logger.log_database_operation("SCHEMA", success=True, duration_ms=duration_ms)
        logger.info("created the database tables with success")

    def run_seed(self, seed_text: str) -> int:
        """
        Splits a seed script on ';' and executes the fragments as one batch.

        All fragments run on a single cursor inside one transaction that is
        committed once at the end.

        Args:
            seed_text (str): The seed script.

        Returns:
            int: Sum of the affected-row counts reported for the fragments.

        Raises:
            SeedExecutionError: If any fragment fails. The whole batch is rolled back.
        """
        self._require_connection(SeedExecutionError)
        fragments = split_seed_script(seed_text)
        affected: List[int] = []
        start_time = time.time()
        cursor = self.connection.cursor()
        try:
            for fragment in fragments:
                cursor.execute(fragment)
                affected.append(cursor.rowcount)
            self.connection.commit()
        except Exception as ex:
            logger.error(f"Seed batch failed at statement {len(affected) + 1} of {len(fragments)}")
            self._rollback()
            raise SeedExecutionError(f"seed batch failed: {ex}") from ex
        finally:
            cursor.close()

        # Drivers report -1 when the count is unknown
        total = sum(count for count in affected if count > 0)
        duration_ms = (time.time() - start_time) * 1000
        logger.log_database_operation("SEED", success=True, duration_ms=duration_ms, row_count=total)
        logger.info(f"the inserted rows is {total}")
        return total

    def execute_query(self, query: Optional[str]) -> ResultCursor:
        """
        Executes a parameterless query and returns a forward-only cursor over its rows.

        The cursor stays registered with this interface until it is closed;
        close_connection() closes any the caller left open.

        Raises:
            QueryExecutionError: If the query cannot be executed.
        """
        self._require_connection(QueryExecutionError)
        start_time = time.time()
        cursor = self.connection.cursor()
        try:
            cursor.execute(query)
        except Exception as ex:
            cursor.close()
            logger.log_sql_execution(query, success=False)
            raise QueryExecutionError(f"query failed: {ex}") from ex

        duration_ms = (time.time() - start_time) * 1000
        logger.log_sql_execution(query, success=True, duration_ms=duration_ms)
        result = ResultCursor(cursor, on_close=self._forget)
        self._cursors.append(result)
        return result

    def _forget(self, cursor: ResultCursor) -> None:
        if cursor in self._cursors:
            self._cursors.remove(cursor)

    def _rollback(self) -> None:
        """Internal helper method to roll back the current transaction."""
        if self.connection is not None:
            try:
                self.connection.rollback()
                logger.info("Transaction rolled back due to error.")
            except Exception as rollback_ex:
                # Keep the original failure as the one that propagates
                logger.critical(f"Error during transaction rollback: {rollback_ex}")

    def close_connection(self) -> None:
        """Closes open query cursors, newest first, then the connection."""
        if self.debug:
            logger.debug("Closing database cursors and connection...")
        while self._cursors:
            cursor = self._cursors.pop()
            try:
                cursor.close()
            except Exception as ex:
                logger.warning(f"Error closing cursor: {ex}")

        if self.connection is not None:
            try:
                self.connection.close()
                logger.info("Connection closed.")
            except Exception as ex:
                logger.warning(f"Error closing connection: {ex}")
            finally:
                self.connection = None
