"""Shared test fixtures for text-translator tests."""
import json
from typing import List

import httpx
import pytest

from config import Config


class FakeSleep:
    """Records requested delays instead of waiting."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.delays)


class RecordingReporter:
    """ProgressReporter stand-in that keeps every event."""

    def __init__(self):
        self.lines: List[str] = []
        self.total = None
        self.advanced = 0
        self.closed = False

    def start(self, total: int) -> None:
        self.total = total

    def advance(self, count: int = 1) -> None:
        self.advanced += count

    def println(self, message: str) -> None:
        self.lines.append(message)

    def close(self) -> None:
        self.closed = True

    def finish(self, message: str) -> None:
        self.close()
        self.lines.append(message)


def translated(text: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json={"translatedText": text})


def scripted_transport(responses: List, requests: List[httpx.Request]) -> httpx.MockTransport:
    """
    Transport answering with the given responses in order.

    An exception instance in the list is raised instead of answering.
    """
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    return httpx.MockTransport(handler)


def echo_transport(requests: List[httpx.Request], prefix: str = "HU:") -> httpx.MockTransport:
    """Transport translating every chunk by prefixing it."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        payload = json.loads(request.content)
        return translated(f"{prefix}{payload['q']}")

    return httpx.MockTransport(handler)


@pytest.fixture
def config() -> Config:
    """Configuration with the production timings and a local endpoint."""
    return Config(api_url="http://translate.test/translate", source_lang="en", target_lang="hu")


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def sent() -> List[httpx.Request]:
    return []
