"""Named statement definitions loaded from a statement property file."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config import FORMAT_SUFFIX, STATEMENT_SUFFIX, STRATEGY_SUFFIX
from ..properties import load_properties
from ..secure_logging import get_secure_logger
from .extraction import ExtractionStrategy, parse_strategies

logger = get_secure_logger(__name__)


@dataclass(frozen=True)
class StatementDefinition:
    name: str
    statement: Optional[str]
    strategy: Optional[str]
    format: Optional[str]

    def strategies(self) -> List[ExtractionStrategy]:
        """Resolve the comma separated strategy tags of this statement."""
        return parse_strategies(self.strategy, statement_name=self.name)


class QueryManager:
    """Manages named SQL statements: their text, extraction strategies and output format."""

    def __init__(self, properties: Dict[str, Optional[str]]):
        """
        Args:
            properties (Dict[str, Optional[str]]): Raw statement properties, keyed
                '<name>.statement', '<name>.strategy' and '<name>.format'.
        """
        self.properties = dict(properties)

    @classmethod
    def from_resources(cls, loader, path: str) -> "QueryManager":
        """
        Load statement definitions from a property resource.

        Raises:
            ResourceNotFoundError: If the property file does not exist.
        """
        manager = cls(load_properties(loader, path))
        logger.debug(f"Statement definitions available: {len(manager.statement_names())}")
        return manager

    def _property(self, name: str, suffix: str) -> Optional[str]:
        return self.properties.get(f"{name}.{suffix}")

    def get_statement(self, name: str) -> StatementDefinition:
        """
        Look up a statement definition by its logical name.

        No validation happens here: a missing key leaves the matching
        attribute as None, and the failure surfaces where it is used.

        Args:
            name (str): Logical statement name, e.g. 'Person.selectAll'.

        Returns:
            StatementDefinition: The definition, possibly with None attributes.
        """
        return StatementDefinition(
            name=name,
            statement=self._property(name, STATEMENT_SUFFIX),
            strategy=self._property(name, STRATEGY_SUFFIX),
            format=self._property(name, FORMAT_SUFFIX),
        )

    def statement_names(self) -> List[str]:
        """Return the logical names that have a '.statement' key, in file order."""
        suffix = f".{STATEMENT_SUFFIX}"
        return [key[: -len(suffix)] for key in self.properties if key.endswith(suffix)]
