"""Shared fixtures: an AgentAiClient wired to an in-memory httpx transport."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from agentai.adapters.agentai_client import AgentAiClient

API_KEY = "test-api-key"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def json_bodies(self) -> list[Any]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def make_client():
    """Build a client whose HTTP traffic is answered by `handler`."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        config: Any = None,
    ) -> tuple[AgentAiClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = AgentAiClient(API_KEY, config, transport=transport)
        return client, transport

    return _make


def json_response(status: int, body: Any) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body)

    return _handler


def raising(exc: Exception) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return _handler
