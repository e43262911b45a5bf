"""
Pipeline error classifications for strict lookups and aggregates.

Raised only by the operation that cannot produce a value; the immediate caller
decides whether to handle it or let the pipeline stop.
"""

from typing import Optional, Dict, Any


class PipelineError(Exception):
    """Base class for failures inside a transaction pipeline stage."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class NotFoundError(PipelineError):
    """Strict find matched no element."""
    
    def __init__(self, message: str, description: Optional[str] = None,
                 searched_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.description = description
        self.searched_count = searched_count


class EmptyAggregateError(PipelineError):
    """An aggregate that needs at least one element was given none."""
    
    def __init__(self, message: str, aggregate: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.aggregate = aggregate
