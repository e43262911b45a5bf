"""
Source error classifications for markup retrieval and parsing.

These exceptions describe why a document could not be produced from a URL or
a file path. Resolvers catch them and hand them back inside a result value.
"""

from typing import Optional, Dict, Any


class SourceError(Exception):
    """Base class for document source issues that can be handled gracefully."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class ParseError(SourceError):
    """A document could not be retrieved or parsed."""
    
    def __init__(self, message: str, source: Optional[str] = None,
                 cause: Optional[BaseException] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.cause = cause


class FetchError(ParseError):
    """Network retrieval failed or returned an error status."""
    
    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code


class FileReadError(ParseError):
    """Local file could not be opened, read or decoded."""
    
    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class MarkupError(ParseError):
    """Retrieved text could not be turned into a document."""
    pass


class SourceConfigurationError(SourceError):
    """A source strategy was constructed with unusable settings."""
    
    def __init__(self, message: str, setting: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.setting = setting
        self.value = value
        self.recoverable = False
