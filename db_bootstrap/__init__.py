"""db_bootstrap package"""
import logging

# Configure a null handler by default
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Expose public interface
from . import sql_interface
from .sql_interface import (
    SQLInterface,
    QueryManager,
    StatementDefinition,
    OutputFormatter,
    ExtractionStrategy,
    BootstrapError,
    ResourceNotFoundError,
    DatabaseConnectionError,
    SchemaExecutionError,
    SeedExecutionError,
    QueryExecutionError,
    ExtractionError,
    InvalidStatementError,
)
from .config import APP_VERSION
from .properties import ConnectionParameters
from .resource_loader import ResourceLoader
from .main import main, run

__version__ = APP_VERSION

__all__ = [
    'sql_interface',
    'SQLInterface',
    'QueryManager',
    'StatementDefinition',
    'OutputFormatter',
    'ExtractionStrategy',
    'ConnectionParameters',
    'ResourceLoader',
    'BootstrapError',
    'ResourceNotFoundError',
    'DatabaseConnectionError',
    'SchemaExecutionError',
    'SeedExecutionError',
    'QueryExecutionError',
    'ExtractionError',
    'InvalidStatementError',
    'main',
    'run',
]
