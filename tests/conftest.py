"""Shared test configuration and fixtures for all tests."""

import io
from typing import List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from src.probe.client_factory import NoRedirectSession
from .test_const import REDIRECT_LOCATION


def make_response(request: requests.PreparedRequest, status_code: int = 200, body: bytes = b"",
                  headers: Optional[dict] = None) -> requests.Response:
    """Build a response the way HTTPAdapter.build_response does, backed by an in-memory body."""
    response = requests.Response()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = io.BytesIO(body)
    response.url = request.url
    response.request = request
    response.reason = "OK" if status_code < 300 else "Found"
    return response


class MockAdapter(BaseAdapter):
    """Transport that replays scripted responses and records every request it sees.

    Each script entry is either an HTTP status code or an exception instance to raise.
    """

    def __init__(self, script: Optional[List] = None, body: bytes = b"payload", on_send=None):
        super().__init__()
        self.script = list(script or [])
        self.body = body
        self.on_send = on_send
        self.sent: List[requests.PreparedRequest] = []
        self.responses: List[requests.Response] = []
        self.closed = False

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.sent.append(request)
        if self.on_send is not None:
            self.on_send(request)
        outcome = self.script.pop(0) if self.script else 200
        if isinstance(outcome, Exception):
            raise outcome

        headers = {"Location": REDIRECT_LOCATION} if 300 <= outcome < 400 else {}
        response = make_response(request, status_code=outcome, body=self.body, headers=headers)
        self.responses.append(response)
        return response

    def close(self):
        self.closed = True


def session_with(adapter: MockAdapter) -> requests.Session:
    """Return a redirect-free session routing every URL through the adapter."""
    session = NoRedirectSession()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class FakeClock:
    """perf_counter replacement returning scripted timestamps."""

    def __init__(self, latencies: List[float]):
        self.timestamps = []
        start = 0.0
        for latency in latencies:
            self.timestamps.extend([start, start + latency])
            start += 1.0
        self.calls = 0

    def __call__(self) -> float:
        value = self.timestamps[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def mock_adapter():
    """Mock transport answering 200 to every request."""
    return MockAdapter()


@pytest.fixture
def mock_session(mock_adapter):
    """Session wired to the mock transport."""
    return session_with(mock_adapter)


@pytest.fixture
def sleep_calls():
    """Records requested sleep durations instead of sleeping."""
    return []


@pytest.fixture
def fake_sleep(sleep_calls):
    """Sleep replacement appending to sleep_calls."""
    return sleep_calls.append
