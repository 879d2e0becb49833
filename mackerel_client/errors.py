"""
Exception types raised by the Mackerel client.
"""

from typing import Optional

from requests.exceptions import RequestException

# Network, TLS and connection failures are raised by requests and propagate
# unchanged; this alias lets callers catch them without importing requests.
TransportError = RequestException


class MackerelError(Exception):
    """Base class for client errors"""
    pass


class RequestConstructionError(MackerelError):
    """The HTTP request could not be built (malformed URL or method)"""
    pass


class UnexpectedStatusError(MackerelError):
    """The API answered with a status code other than 200"""

    def __init__(
        self,
        status_code: int,
        method: Optional[str] = None,
        url: Optional[str] = None,
        body: str = ""
    ):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body

        message = f"Unexpected status code: {status_code} (expected 200)"
        if method and url:
            message += f" for {method} {url}"
        super().__init__(message)


class DecodeError(MackerelError, ValueError):
    """Response body is not valid JSON or does not have the expected shape"""
    pass


class ConfigError(MackerelError):
    """Configuration error exception"""
    pass
