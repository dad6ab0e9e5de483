"""Resolution of bundled configuration and SQL script resources."""
import importlib.resources as resources
import io
import os
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, TextIO, Union

from .config import DEFAULT_FILE_ENCODING
from .secure_logging import get_secure_logger
from .sql_interface.exceptions import ResourceNotFoundError

logger = get_secure_logger(__name__)

RESOURCE_PACKAGE = "db_bootstrap.resources"


class ResourceLoader:
    """Loads named resources from the packaged resource set or an override directory."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            base_dir (Optional[Union[str, Path]]): Directory holding the resources.
                When None, the resources bundled with the package are used.

        Raises:
            ValueError: If base_dir is given but is not a directory.
        """
        if base_dir is not None and not os.path.isdir(str(base_dir)):
            raise ValueError(f"resources directory does not exist: {base_dir}")
        self.base_dir = str(base_dir) if base_dir is not None else None

    def _locate(self, path: str):
        parts = [part for part in path.split("/") if part]
        if self.base_dir is not None:
            return Path(self.base_dir).joinpath(*parts)
        return resources.files(RESOURCE_PACKAGE).joinpath(*parts)

    def load(self, path: str) -> BinaryIO:
        """
        Open a resource as a binary stream.

        The caller owns the stream and must close it.

        Args:
            path (str): '/'-separated path relative to the resource root.

        Returns:
            BinaryIO: The opened stream.

        Raises:
            ResourceNotFoundError: If the resource does not exist.
        """
        if not path:
            raise ResourceNotFoundError(path)
        resource = self._locate(path)
        if not resource.is_file():
            raise ResourceNotFoundError(path)
        logger.debug(f"Loading resource '{path}'")
        return resource.open("rb")

    @contextmanager
    def open_text(self, path: str) -> Iterator[TextIO]:
        """Open a resource as UTF-8 text, keeping its line structure."""
        with self.load(path) as stream:
            with io.TextIOWrapper(stream, encoding=DEFAULT_FILE_ENCODING) as reader:
                yield reader

    def read_as_text(self, path: str) -> str:
        """
        Read a resource as UTF-8 text with all lines joined without separators.

        Line terminators are dropped, so a multi-line script comes back as one
        logical line.

        Args:
            path (str): '/'-separated path relative to the resource root.

        Returns:
            str: The concatenated lines.

        Raises:
            ResourceNotFoundError: If the resource does not exist.
        """
        with self.open_text(path) as reader:
            return "".join(line.rstrip("\r\n") for line in reader)
