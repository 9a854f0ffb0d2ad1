import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from loguru import logger

from src.models.enums import SourceKind


class DataSourceError(Exception):
    """Custom exception for data source errors."""

    pass


class SourceNotFoundError(DataSourceError):
    """Exception raised when a document does not exist (missing file, 404)."""

    pass


class MalformedDocumentError(DataSourceError):
    """Exception raised when a document is not a JSON array."""

    pass


class BaseSource(ABC):
    """Abstract base class for the places league documents are read from."""

    kind: SourceKind

    def __init__(self, location: str):
        self.location = location

    @abstractmethod
    async def fetch_text(self) -> str:
        """Fetch the raw document text.

        Raises:
            SourceNotFoundError: The document does not exist.
            DataSourceError: Any other failure reading it.
        """
        pass

    async def fetch_records(self) -> List[Dict[str, Any]]:
        """Fetch the document and return its top-level JSON array."""
        text = await self.fetch_text()
        records = parse_document(text, self.location)
        logger.debug(f"Read {len(records)} records from {self.label}")
        return records

    async def close(self) -> None:
        """Releases any resources held by the source."""
        pass

    @property
    def label(self) -> str:
        """Kind and location, for log lines."""
        return f"{self.kind.value.lower()} {self.location}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"


def parse_document(text: str, location: str) -> List[Dict[str, Any]]:
    """Decodes ``text`` as a JSON array."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"Invalid JSON in {location}: {e}") from e

    if not isinstance(document, list):
        raise MalformedDocumentError(
            f"Expected a JSON array in {location}, got {type(document).__name__}"
        )
    return document
