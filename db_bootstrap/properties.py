"""Property-file loading and the connection parameters read from it."""
from dataclasses import dataclass
from typing import Dict, Optional

from jproperties import Properties

from .config import DEFAULT_FILE_ENCODING, PASSWORD_KEY, URL_KEY, USER_KEY
from .secure_logging import get_secure_logger

logger = get_secure_logger(__name__)


def load_properties(loader, path: str) -> Dict[str, Optional[str]]:
    """
    Load a Java-style property file through a ResourceLoader.

    Keys and values are separated by '=', ':' or whitespace. Only lines that
    start with '#' or '!' are comments, so a '#' inside a value is kept.
    Values are taken verbatim apart from backslash escapes.

    Args:
        loader (ResourceLoader): Loader the file is resolved against.
        path (str): Resource path of the property file.

    Returns:
        Dict[str, Optional[str]]: The parsed properties, in file order.

    Raises:
        ResourceNotFoundError: If the property file does not exist.
    """
    parsed = Properties()
    with loader.load(path) as stream:
        parsed.load(stream, DEFAULT_FILE_ENCODING)
    properties = {key: value.data for key, value in parsed.items()}
    logger.debug(f"Loaded {len(properties)} properties from '{path}'")
    return properties


@dataclass(frozen=True)
class ConnectionParameters:
    url: Optional[str]
    user: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_properties(cls, properties: Dict[str, Optional[str]]) -> "ConnectionParameters":
        """Build connection parameters; missing keys are kept as None."""
        return cls(
            url=properties.get(URL_KEY),
            user=properties.get(USER_KEY),
            password=properties.get(PASSWORD_KEY),
        )

    def __repr__(self) -> str:
        password = "***" if self.password else None
        return f"ConnectionParameters(url={self.url!r}, user={self.user!r}, password={password!r})"
