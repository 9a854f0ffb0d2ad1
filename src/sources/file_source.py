# src/sources/file_source.py

import asyncio
from pathlib import Path

from src.models.enums import SourceKind
from .base_source import BaseSource, DataSourceError, SourceNotFoundError


class FileSource(BaseSource):
    """Reads a league document from the local filesystem."""

    kind: SourceKind = SourceKind.FILE

    def __init__(self, location: str):
        super().__init__(location)
        self.path = Path(location).expanduser()

    async def fetch_text(self) -> str:
        try:
            return await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        except FileNotFoundError as e:
            raise SourceNotFoundError(f"Failed to load {self.location}: file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Failed to load {self.location}: {e}") from e
