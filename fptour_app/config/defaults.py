"""Default configuration parameters for document resolution and the tour."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceParams:
    """Document source retrieval parameters."""
    # Network strategy
    timeout_seconds: float = 10.0                    # Blocking fetch upper bound
    user_agent: str = "fptour-app/0.1"

    # Decoding
    encoding: str = "utf-8"                          # Fallback when no charset is declared

    # Size guard
    max_bytes: int = 5 * 1024 * 1024                 # Larger bodies are rejected


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class TourParams:
    """Parameters for the demonstration run."""
    html_source: Optional[str] = None                # URL or path, skipped when unset
    min_amount: float = 1500.0                       # Filter threshold for large transactions
    lookup_customer: str = "Acme"
    missing_customer: str = "NoSuchCo"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    source: SourceParams
    logging: LoggingParams
    tour: TourParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        source=SourceParams(),
        logging=LoggingParams(),
        tour=TourParams(),
    )
