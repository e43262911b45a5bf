"""
Centralized logging configuration for the FP tour.

This module provides standardized logging configuration using structlog
for all components. Resolvers, pipelines and the tour driver obtain their
loggers here so output shares one processor chain.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    # Final rendering
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_params(params: LoggingParams) -> None:
    """Configure logging from the typed logging section of the config."""
    configure_logging(
        level=params.level,
        format_json=params.format_json,
        include_timestamp=params.include_timestamp,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_source_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the document source subsystem."""
    return structlog.get_logger(name, subsystem="sources")


def get_pipeline_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the transaction pipeline subsystem."""
    return structlog.get_logger(name, subsystem="pipeline")


def log_resolution(
    logger: FilteringBoundLogger,
    strategy: str,
    source: str,
    succeeded: bool,
    reason: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a document resolution outcome with standardized format.

    Args:
        logger: Structlog logger instance
        strategy: Name of the source strategy that ran
        source: URL or path that was resolved
        succeeded: Whether a document was produced
        reason: Failure description when not succeeded
        context: Additional context data
    """
    bound_logger = logger.bind(
        strategy=strategy,
        source=source,
        resolution_result="OK" if succeeded else "FAILED",
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if succeeded:
        bound_logger.info("Document resolved")
    else:
        bound_logger.warning("Document resolution failed")


def log_pipeline_step(
    logger: FilteringBoundLogger,
    step: str,
    input_count: int,
    result: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a single pipeline stage application.

    Args:
        logger: Structlog logger instance
        step: Stage name
        input_count: Number of elements the stage received
        result: Stage output (summarised as a count for sequences)
        context: Additional context data
    """
    if isinstance(result, (list, tuple)):
        summary: Any = {"output_count": len(result)}
    else:
        summary = {"output": repr(result)}

    bound_logger = logger.bind(step=step, input_count=input_count, **summary)

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Pipeline step applied")
