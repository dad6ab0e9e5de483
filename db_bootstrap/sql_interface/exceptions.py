"""Custom exceptions for the SQL interface."""


class BootstrapError(Exception):
    """Base class for every failure raised by db_bootstrap."""
    pass


class ResourceNotFoundError(BootstrapError):
    """Raised when a named resource cannot be found in the resource set."""

    def __init__(self, path: str, message: str = None):
        self.path = path
        super().__init__(message or f"could not load the resource file: {path}")


class DatabaseConnectionError(BootstrapError):
    """Raised when unable to connect to the database."""
    pass


class SchemaExecutionError(BootstrapError):
    """Raised when the schema (DDL) script fails to execute."""
    pass


class SeedExecutionError(BootstrapError):
    """Raised when the seed batch fails to execute."""
    pass


class QueryExecutionError(BootstrapError):
    """Raised when a query fails to execute."""
    pass


class ExtractionError(BootstrapError):
    """Raised when a column value cannot be extracted or a row cannot be rendered."""
    pass


class InvalidStatementError(BootstrapError):
    """Raised when a statement definition is missing or malformed."""
    pass
