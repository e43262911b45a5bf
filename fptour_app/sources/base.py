"""Base classes for document source strategies."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..config.defaults import SourceParams
from ..errors import ParseError, SourceConfigurationError
from ..logging.config import get_source_logger, log_resolution
from .document import Document, parse_markup


class ResolveStatus(Enum):
    """Document resolution status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of resolving one source: a document or the error that prevented it."""
    status: ResolveStatus
    source: str
    document: Optional[Document] = None
    error: Optional[ParseError] = None
    elapsed_ms: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == ResolveStatus.SUCCESS

    def to_optional(self) -> Optional[Document]:
        """Collapse to the document, or None on failure."""
        return self.document if self.ok else None

    @classmethod
    def success(cls, document: Document, elapsed_ms: Optional[int] = None) -> "ResolveResult":
        """Create successful result."""
        return cls(
            status=ResolveStatus.SUCCESS,
            source=document.source,
            document=document,
            elapsed_ms=elapsed_ms
        )

    @classmethod
    def failure(cls, source: str, error: ParseError,
                elapsed_ms: Optional[int] = None) -> "ResolveResult":
        """Create failed result."""
        return cls(
            status=ResolveStatus.FAILED,
            source=source,
            error=error,
            elapsed_ms=elapsed_ms
        )


class BaseDocumentSource(ABC):
    """Base class for document source strategies."""

    def __init__(self, name: str, config: Optional[SourceParams] = None):
        self.name = name
        self.config = config or SourceParams()
        self.logger = get_source_logger(f"sources.{name}")
        self._resolved_count = 0
        self._error_count = 0

        if not self.config.encoding:
            raise SourceConfigurationError(
                "Encoding must be set", setting="encoding", value=self.config.encoding
            )
        if self.config.max_bytes <= 0:
            raise SourceConfigurationError(
                "max_bytes must be positive", setting="max_bytes", value=self.config.max_bytes
            )

    @abstractmethod
    def fetch_text(self, source: str) -> str:
        """
        Retrieve raw markup text for a source.

        Args:
            source: URL or filesystem path understood by the strategy

        Returns:
            Markup text

        Raises:
            ParseError: If the text cannot be retrieved
        """
        pass

    def parse(self, source: str) -> Document:
        """Retrieve and parse a source; raises ParseError on failure."""
        return parse_markup(self.fetch_text(source), source=source)

    def resolve(self, source: str) -> ResolveResult:
        """
        Resolve a source into a result value.

        Failures never escape: every retrieval or parse problem is returned
        as a failed ResolveResult carrying a ParseError.
        """
        start_time = time.time()

        try:
            document = self.parse(source)

        except ParseError as e:
            error = e

        except Exception as e:
            error = ParseError(f"Unexpected error: {e}", source=source, cause=e)

        else:
            elapsed_ms = int((time.time() - start_time) * 1000)
            self._resolved_count += 1
            log_resolution(self.logger, self.name, source, True,
                           context={"elapsed_ms": elapsed_ms})
            return ResolveResult.success(document, elapsed_ms=elapsed_ms)

        elapsed_ms = int((time.time() - start_time) * 1000)
        self._error_count += 1
        log_resolution(self.logger, self.name, source, False, reason=str(error),
                       context={"error_type": type(error).__name__})
        return ResolveResult.failure(source, error, elapsed_ms=elapsed_ms)

    def get_stats(self) -> dict[str, Any]:
        """Get resolution statistics."""
        total = self._resolved_count + self._error_count
        return {
            "name": self.name,
            "resolved_count": self._resolved_count,
            "error_count": self._error_count,
            "success_rate": self._resolved_count / total if total > 0 else 0.0
        }

    def reset_stats(self):
        """Reset resolution statistics."""
        self._resolved_count = 0
        self._error_count = 0
