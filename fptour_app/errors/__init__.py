"""
Error classification for document resolution and transaction pipelines.

Source errors describe retrieval and parse failures and are returned to callers
as values. Pipeline errors are raised at the specific lookup or aggregate that
could not produce a result.
"""

from .source_failures import (
    SourceError,
    ParseError,
    FetchError,
    FileReadError,
    MarkupError,
    SourceConfigurationError,
)
from .pipeline_errors import (
    PipelineError,
    NotFoundError,
    EmptyAggregateError,
)

__all__ = [
    # Source Errors
    "SourceError",
    "ParseError",
    "FetchError",
    "FileReadError",
    "MarkupError",
    "SourceConfigurationError",
    # Pipeline Errors
    "PipelineError",
    "NotFoundError",
    "EmptyAggregateError",
]
