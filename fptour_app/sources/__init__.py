"""
Document source resolution.

Retrieves markup from a URL or a local file through interchangeable source
strategies, parses it into an immutable Document and exposes tag-name queries
such as anchor link extraction.
"""

from .base import BaseDocumentSource, ResolveResult, ResolveStatus
from .document import Document, Element, parse_markup
from .file_source import FileDocumentSource
from .http_source import HttpDocumentSource
from .resolver import create_source, get_html, hrefs, links, links_from_html, resolve

__all__ = [
    "BaseDocumentSource",
    "ResolveResult",
    "ResolveStatus",
    "Document",
    "Element",
    "parse_markup",
    "FileDocumentSource",
    "HttpDocumentSource",
    "create_source",
    "get_html",
    "hrefs",
    "links",
    "links_from_html",
    "resolve",
]
