"""Shared fixtures: a fake transport returning canned responses."""

import io
import json
from typing import List

import pytest
import requests

from mackerel_client.client import MonitorClient
from mackerel_client.transport import Transport

BASE_URL = "https://mackerel.example.com"

# Response of GET /api/v0/monitors holding one monitor of each type
MONITORS_BODY = {
    "monitors": [
        {
            "id": "2cSZzK3XfmG",
            "type": "connectivity",
            "scopes": [],
            "excludeScopes": []
        },
        {
            "id": "2cSZzK3XfmG",
            "type": "host",
            "name": "disk.aa-00.writes.delta",
            "duration": 3,
            "metric": "disk.aa-00.writes.delta",
            "operator": ">",
            "warning": 20000.0,
            "critical": 400000.0,
            "scopes": ["SomeService"],
            "excludeScopes": ["SomeService: db-slave-backup"]
        },
        {
            "id": "2cSZzK3XfmG",
            "type": "service",
            "name": "SomeService - custom.access_num.4xx_count",
            "service": "SomeService",
            "duration": 1,
            "metric": "custom.access_num.4xx_count",
            "operator": ">",
            "warning": 50.0,
            "critical": 100.0
        },
        {
            "id": "2cSZzK3XfmG",
            "type": "external",
            "name": "example.com",
            "url": "http://www.example.com"
        }
    ]
}


class TrackingResponse(requests.Response):
    """Response that remembers whether it was closed"""

    def __init__(self):
        super().__init__()
        self.closed = False

    def close(self):
        self.closed = True
        super().close()


def make_response(status_code: int = 200, body=None) -> TrackingResponse:
    """Build a response; dict/list bodies are JSON encoded, str/bytes sent as-is"""
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode('utf-8')
    else:
        content = json.dumps(body).encode('utf-8')

    response = TrackingResponse()
    response.status_code = status_code
    response.raw = io.BytesIO(content)
    response.encoding = 'utf-8'
    response.headers['Content-Type'] = 'application/json'
    return response


class FakeTransport(Transport):
    """Transport that records requests and replays queued responses or errors"""

    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.requests: List[requests.PreparedRequest] = []
        self.responses: List[TrackingResponse] = []
        self._queue = []

    def queue(self, status_code: int = 200, body=None) -> TrackingResponse:
        response = make_response(status_code, body)
        self._queue.append(response)
        return response

    def queue_error(self, error: Exception) -> None:
        self._queue.append(error)

    def url_for(self, path: str) -> str:
        return self.base_url + path

    def request(self, prepared: requests.PreparedRequest) -> requests.Response:
        self.requests.append(prepared)
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        self.responses.append(item)
        return item

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]


@pytest.fixture
def transport():
    """Fake transport with an empty response queue"""
    return FakeTransport()


@pytest.fixture
def client(transport):
    """MonitorClient wired to the fake transport"""
    return MonitorClient(transport)
