"""
Database source interfaces and implementations.

A source supplies the raw database text as one blob. Reading is blocking, so
``fetch`` pushes it onto a worker thread for async callers.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

import requests

from ..core.config import DEFAULT_DATABASE_NAME, SourceConfig
from ..core.exceptions import SourceLoadError, handle_source_error

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="chardb-source")


class DatabaseSource(ABC):
    """Protocol for database source implementations."""

    @abstractmethod
    def describe(self) -> str:
        """
        Human-readable location of this source, used in logs and errors.
        """
        pass

    @abstractmethod
    def read_text(self) -> str:
        """
        Read the whole database blob.

        Returns:
            The raw database text

        Raises:
            SourceLoadError: If the source cannot be reached or read
        """
        pass

    async def fetch(self) -> str:
        """Read the database without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_executor, self.read_text)


class RemoteDatabaseSource(DatabaseSource):
    """Loads the database over HTTP."""

    def __init__(self, url: str, timeout_s: float = 10.0) -> None:
        self.url = url
        self.timeout_s = timeout_s

    def describe(self) -> str:
        return self.url

    @handle_source_error
    def read_text(self) -> str:
        response = requests.get(self.url, timeout=self.timeout_s)
        if not response.ok:
            raise SourceLoadError(
                self.url,
                f"HTTP {response.status_code}",
                component="RemoteDatabaseSource",
            )
        logger.debug(f"Fetched {len(response.content)} bytes from {self.url}")
        return response.text


class LocalFileDatabaseSource(DatabaseSource):
    """Loads the database from a file on disk."""

    def __init__(
        self, path: Path = Path(DEFAULT_DATABASE_NAME), encoding: str = "utf-8"
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding

    def describe(self) -> str:
        return str(self.path)

    @handle_source_error
    def read_text(self) -> str:
        if not self.path.is_file():
            raise SourceLoadError(
                str(self.path), "no such file", component="LocalFileDatabaseSource"
            )
        # Undecodable bytes become U+FFFD
        return self.path.read_text(encoding=self.encoding, errors="replace")


def remote_source_from_config(config: SourceConfig) -> Optional[RemoteDatabaseSource]:
    """Remote source for the configured URL, or None if remote loading is off."""
    url = config.database_url
    if url is None:
        return None
    return RemoteDatabaseSource(url, timeout_s=config.timeout_s)


def local_source_from_config(config: SourceConfig) -> LocalFileDatabaseSource:
    return LocalFileDatabaseSource(config.local_path, encoding=config.encoding)
