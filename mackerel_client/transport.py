"""
HTTP transport used by the API clients.

The client layer only depends on the small ``Transport`` interface, so tests
and embedding applications can supply their own implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import urlsplit, urlunsplit
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mackerelio.com/"
DEFAULT_USER_AGENT = "mackerel-client-python"
DEFAULT_TIMEOUT = 30


class Transport(ABC):
    """
    Abstract base class for transports.

    Implementations own authentication and connection reuse. Whether a
    transport may be shared between threads is up to the implementation.
    """

    @abstractmethod
    def url_for(self, path: str) -> str:
        """
        Build the absolute request URL for an API path.

        Args:
            path: API path such as /api/v0/monitors

        Returns:
            Fully-qualified URL
        """
        pass

    def prepare(self, request: requests.Request) -> requests.PreparedRequest:
        """
        Turn a request built by the client into a PreparedRequest.

        Raises:
            requests.exceptions.MissingSchema, InvalidSchema, InvalidURL:
                If the URL cannot be used
        """
        return request.prepare()

    @abstractmethod
    def request(self, prepared: requests.PreparedRequest) -> requests.Response:
        """
        Send a prepared request.

        Network level failures are raised as requests exceptions.

        Args:
            prepared: Request built by the client

        Returns:
            Response; the caller is responsible for closing it
        """
        pass


class HTTPTransport(Transport):
    """Transport backed by a requests.Session, authenticated with an API key"""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        verbose: bool = False,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize transport.

        Args:
            api_key: Mackerel API key, sent as the X-Api-Key header
            base_url: Scheme and host of the API (query string is kept)
            user_agent: User-Agent header value
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            verbose: Log every request and response status at DEBUG level
            session: Session to reuse (a new one is created if omitted)
        """
        self.api_key = api_key
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.verbose = verbose
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        parts = urlsplit(self.base_url)
        return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ''))

    def prepare(self, request: requests.Request) -> requests.PreparedRequest:
        # session headers, auth and cookies apply to every call
        return self.session.prepare_request(request)

    def request(self, prepared: requests.PreparedRequest) -> requests.Response:
        prepared.headers['X-Api-Key'] = self.api_key
        prepared.headers['User-Agent'] = self.user_agent

        if self.verbose:
            logger.debug(f"{prepared.method} {prepared.url}")

        # proxies and CA bundle from the environment (REQUESTS_CA_BUNDLE, HTTPS_PROXY)
        settings = self.session.merge_environment_settings(
            prepared.url, {}, None, self.verify_ssl, None
        )
        response = self.session.send(prepared, timeout=self.timeout, **settings)

        if self.verbose:
            logger.debug(f"{prepared.method} {prepared.url} -> {response.status_code}")

        return response

    def close(self) -> None:
        """Close the underlying session"""
        self.session.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<HTTPTransport(base_url='{self.base_url}')>"
