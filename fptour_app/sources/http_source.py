"""HTTP GET document source strategy."""

import socket
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from ..config.defaults import SourceParams
from ..errors import FetchError, SourceConfigurationError
from .base import BaseDocumentSource


class HttpDocumentSource(BaseDocumentSource):
    """Fetches markup over HTTP(S) with a blocking GET."""

    SUPPORTED_SCHEMES = ("http", "https")

    def __init__(self, config: Optional[SourceParams] = None, name: str = "http"):
        super().__init__(name, config)

        if self.config.timeout_seconds is None or self.config.timeout_seconds <= 0:
            raise SourceConfigurationError(
                f"Invalid timeout: {self.config.timeout_seconds}",
                setting="timeout_seconds",
                value=self.config.timeout_seconds
            )

    def fetch_text(self, source: str) -> str:
        """Fetch a URL and decode its body."""
        try:
            parsed = urlparse(source)
        except ValueError as e:
            raise FetchError(f"Invalid URL: {source}", source=source, cause=e) from e

        if parsed.scheme not in self.SUPPORTED_SCHEMES or not parsed.netloc:
            raise FetchError(f"Invalid URL: {source}", source=source)

        req = Request(
            source,
            headers={'User-Agent': self.config.user_agent, 'Accept': 'text/html'},
            method='GET'
        )

        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                response_code = response.getcode()
                body = response.read(self.config.max_bytes + 1)
                charset = response.headers.get_content_charset() or self.config.encoding

        except HTTPError as e:
            self.logger.warning(
                "Fetch HTTP error",
                source=source,
                error_code=e.code,
                error_reason=str(e.reason)
            )
            raise FetchError(
                f"HTTP {e.code}: {e.reason}", status_code=e.code, source=source, cause=e
            ) from e

        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning("Fetch network error", source=source, error=str(e))
            raise FetchError(f"Network error: {e}", source=source, cause=e) from e

        if not 200 <= response_code < 300:
            raise FetchError(f"HTTP {response_code}", status_code=response_code, source=source)

        if len(body) > self.config.max_bytes:
            raise FetchError(
                f"Response exceeds {self.config.max_bytes} bytes",
                status_code=response_code,
                source=source
            )

        try:
            return body.decode(charset, errors="replace")
        except LookupError:
            # Unknown charset label from the server
            return body.decode(self.config.encoding, errors="replace")
