"""Local file document source strategy."""

from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from ..config.defaults import SourceParams
from ..errors import FileReadError
from ..utils.files import read_all_text
from .base import BaseDocumentSource


class FileDocumentSource(BaseDocumentSource):
    """Reads markup from the local filesystem."""

    def __init__(self, config: Optional[SourceParams] = None, name: str = "file"):
        super().__init__(name, config)

    def fetch_text(self, source: str) -> str:
        """Read a file path (or file:// URL) as text."""
        path = self.to_path(source)

        try:
            size = path.stat().st_size
            if size > self.config.max_bytes:
                raise FileReadError(
                    f"File exceeds {self.config.max_bytes} bytes: {path}",
                    path=str(path),
                    source=source
                )
            return read_all_text(path, encoding=self.config.encoding)

        except OSError as e:
            self.logger.warning("File read error", path=str(path), error=str(e))
            raise FileReadError(
                f"File system error: {e}", path=str(path), source=source, cause=e
            ) from e

        except UnicodeDecodeError as e:
            self.logger.warning(
                "File decode error", path=str(path), encoding=self.config.encoding
            )
            raise FileReadError(
                f"Cannot decode {path} as {self.config.encoding}",
                path=str(path),
                source=source,
                cause=e
            ) from e

    @staticmethod
    def to_path(source: str) -> Path:
        """Convert a path or file:// URL to a Path."""
        try:
            parsed = urlparse(source)
        except ValueError:
            return Path(source)
        if parsed.scheme == "file":
            return Path(unquote(parsed.path))
        return Path(source)
