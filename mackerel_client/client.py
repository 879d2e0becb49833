"""
Client for the Mackerel monitors API.

Each method performs exactly one HTTP round trip:
build request -> send -> check status -> decode JSON body.
"""

import json
from typing import Any, List, Optional
from urllib.parse import quote
import logging

import requests
from requests.exceptions import InvalidSchema, InvalidURL, MissingSchema

from mackerel_client.config import ClientConfig
from mackerel_client.errors import DecodeError, RequestConstructionError, UnexpectedStatusError
from mackerel_client.monitors import Monitor, monitor_from_dict
from mackerel_client.transport import HTTPTransport, Transport

logger = logging.getLogger(__name__)

MONITORS_PATH = "/api/v0/monitors"


class MonitorClient:
    """
    CRUD operations on monitors.

    The client keeps no state besides its transport, so it is safe to call
    from several threads whenever the transport is. HTTPTransport shares one
    requests.Session, which requests does not guarantee to be thread-safe;
    give each thread its own transport in that case.

    Errors raised by the transport (connection refused, timeouts, TLS
    failures) propagate unchanged as requests exceptions.
    """

    def __init__(self, transport: Transport):
        """
        Initialize client.

        Args:
            transport: Transport that builds URLs and sends authenticated requests
        """
        self.transport = transport

    @classmethod
    def from_config(cls, config: ClientConfig) -> "MonitorClient":
        """
        Create a client with an HTTPTransport built from configuration.

        Args:
            config: Client configuration

        Returns:
            MonitorClient instance
        """
        transport = HTTPTransport(
            api_key=config.api_key,
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            verbose=config.verbose
        )
        return cls(transport)

    def find_monitors(self) -> List[Monitor]:
        """
        List all monitors.

        Returns:
            Monitors in the order returned by the API

        Raises:
            UnexpectedStatusError: If the API does not answer 200
            DecodeError: If the body is not a {"monitors": [...]} document
        """
        data = self._send(self._prepare('GET', MONITORS_PATH))

        if not isinstance(data, dict) or not isinstance(data.get('monitors'), list):
            raise DecodeError("Response body has no 'monitors' list")

        monitors = [monitor_from_dict(item) for item in data['monitors']]
        logger.debug(f"Found {len(monitors)} monitors")
        return monitors

    def create_monitor(self, monitor: Monitor) -> Monitor:
        """
        Create a monitor.

        Args:
            monitor: Monitor definition, usually without an id

        Returns:
            Created monitor including the id assigned by the service
        """
        data = self._send(self._prepare('POST', MONITORS_PATH, monitor))
        return self._decode_monitor(data)

    def update_monitor(self, monitor_id: str, monitor: Monitor) -> Monitor:
        """
        Replace a monitor.

        The whole definition is sent; fields left unset are cleared on the
        service side.

        Args:
            monitor_id: Id of the monitor to replace
            monitor: New monitor definition

        Returns:
            Updated monitor
        """
        data = self._send(self._prepare('PUT', self._monitor_path(monitor_id), monitor))
        return self._decode_monitor(data)

    def delete_monitor(self, monitor_id: str) -> Optional[Monitor]:
        """
        Delete a monitor.

        Args:
            monitor_id: Id of the monitor to delete

        Returns:
            The deleted monitor, or None if the API returned an empty body
        """
        data = self._send(self._prepare('DELETE', self._monitor_path(monitor_id)))
        if data is None:
            return None
        return monitor_from_dict(data)

    @staticmethod
    def _monitor_path(monitor_id: str) -> str:
        return f"{MONITORS_PATH}/{quote(monitor_id, safe='')}"

    def _prepare(
        self,
        method: str,
        path: str,
        monitor: Optional[Monitor] = None
    ) -> requests.PreparedRequest:
        """
        Build a request, with the monitor as JSON body when given.

        Raises:
            RequestConstructionError: If the URL cannot be used
        """
        url = self.transport.url_for(path)
        headers = {}
        body = None

        if monitor is not None:
            body = json.dumps(monitor.to_dict()).encode('utf-8')
            headers['Content-Type'] = 'application/json'

        try:
            return self.transport.prepare(requests.Request(method, url, headers=headers, data=body))
        except (MissingSchema, InvalidSchema, InvalidURL) as e:
            raise RequestConstructionError(f"Cannot build {method} request for '{url}': {e}") from e

    def _send(self, prepared: requests.PreparedRequest) -> Any:
        """
        Send a request and decode its JSON body.

        The response is closed before returning, on success and on error.

        Returns:
            Decoded JSON, or None for an empty body
        """
        with self.transport.request(prepared) as response:
            if response.status_code != 200:
                raise UnexpectedStatusError(
                    response.status_code,
                    method=prepared.method,
                    url=prepared.url,
                    body=response.text
                )
            content = response.content

        if not content or not content.strip():
            return None

        try:
            return json.loads(content)
        except ValueError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

    @staticmethod
    def _decode_monitor(data: Any) -> Monitor:
        if data is None:
            raise DecodeError("Response body is empty")
        return monitor_from_dict(data)

    def __repr__(self) -> str:
        return f"<MonitorClient(transport={self.transport!r})>"
