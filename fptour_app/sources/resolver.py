"""
Strategy selection and option-returning helpers over document sources.

get_html collapses a resolution to Optional[Document]; links accepts that
optional and returns an empty tuple for None, so the two compose directly.
"""

from typing import Iterable, Optional
from urllib.parse import urlparse

from ..config.defaults import SourceParams
from ..logging.config import get_source_logger
from ..utils.functional import compose
from .base import BaseDocumentSource, ResolveResult
from .document import Document, Element
from .file_source import FileDocumentSource
from .http_source import HttpDocumentSource

logger = get_source_logger(__name__)


def source_scheme(source: str) -> str:
    """Lowercased URL scheme, read from the prefix when the URL is malformed."""
    try:
        return urlparse(source).scheme.lower()
    except ValueError:
        head, sep, _ = source.partition("://")
        return head.lower() if sep else ""


def create_source(source: str, config: Optional[SourceParams] = None) -> BaseDocumentSource:
    """Pick the network strategy for http(s) URLs and the file strategy otherwise."""
    if source_scheme(source) in HttpDocumentSource.SUPPORTED_SCHEMES:
        return HttpDocumentSource(config)
    return FileDocumentSource(config)


def resolve(source: str, config: Optional[SourceParams] = None) -> ResolveResult:
    """Resolve a URL or path with the matching strategy."""
    return create_source(source, config).resolve(source)


def get_html(source: str, config: Optional[SourceParams] = None) -> Optional[Document]:
    """Resolve a source, returning None when it cannot be loaded."""
    result = resolve(source, config)
    if not result.ok:
        logger.error("Could not load document", source=source, error=str(result.error))
    return result.to_optional()


def links(document: Optional[Document]) -> tuple[Element, ...]:
    """Anchor elements of a document; empty when there is no document."""
    if document is None:
        return ()
    return document.descendants("a")


def hrefs(elements: Iterable[Element]) -> tuple[str, ...]:
    """href values of the elements that carry one, in order; empty hrefs are kept."""
    return tuple(href for href in (e.attr("href") for e in elements) if href is not None)


links_from_html = compose(get_html, links)
