"""Configuration constants and settings for db_bootstrap."""
import os

# Application constants
APP_VERSION = "0.1.0"

# Resource paths, relative to the resource root
PROPERTIES_PATH = "application.properties"
STATEMENTS_PATH = "sql/queries.properties"
LOGGING_PATH = "logging.conf"
INIT_SQL_PATH = "sql/init.sql"
DATA_LOAD_PATH = "sql/load.sql"

# Connection property keys
URL_KEY = "jdbc.url"
USER_KEY = "jdbc.user"
PASSWORD_KEY = "jdbc.password"

# Statement property suffixes: <name>.statement, <name>.strategy, <name>.format
STATEMENT_SUFFIX = "statement"
STRATEGY_SUFFIX = "strategy"
FORMAT_SUFFIX = "format"
STRATEGY_SEPARATOR = ","

DEFAULT_STATEMENT_NAME = "Person.selectAll"

# Seed scripts are split on this literal, with no awareness of string literals
SEED_SEPARATOR = ";"

# Format templates use %n as a line separator
LINE_SEPARATOR_TOKEN = "%n"
NULL_TEXT = "null"

# Environment variables (may come from a .env file)
RESOURCES_DIR_ENV = "DB_BOOTSTRAP_RESOURCES_DIR"
STATEMENT_NAME_ENV = "DB_BOOTSTRAP_STATEMENT"
DEBUG_ENV = "DB_BOOTSTRAP_DEBUG"

# Logging configuration
LOGGER_NAME = "db_bootstrap.main"

DEFAULT_FILE_ENCODING = 'utf-8'

TRUTHY_VALUES = {'1', 'true', 'yes', 'on'}


def get_env_or_default(key: str, default: str = "") -> str:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def env_flag(key: str) -> bool:
    """Interpret an environment variable as a boolean switch."""
    return get_env_or_default(key).strip().lower() in TRUTHY_VALUES
