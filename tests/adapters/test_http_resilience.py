from __future__ import annotations

import asyncio

import httpx

from tweakcompat.adapters.http_resilience import (
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
)


def _config(**overrides: object) -> ResilienceConfig:
    settings: dict[str, object] = {
        "name": "test",
        "base_url": "https://api.example.test",
        "retry": RetryPolicy(total=2, backoff_factor=0.0),
        "ratelimit": RateLimit(max_calls=10, per_seconds=1.0),
        "default_headers": {"Authorization": "Bearer abc"},
    }
    settings.update(overrides)
    return ResilienceConfig(**settings)  # type: ignore[arg-type]


def _run(config: ResilienceConfig, transport: httpx.MockTransport) -> httpx.Response:
    async def call() -> httpx.Response:
        async with ResilientClient(config, transport=transport) as client:
            return await client.get("/ping", params={"page": "1"})

    return asyncio.run(call())


def test_client_sends_base_url_headers_and_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    response = _run(_config(), httpx.MockTransport(handler))

    assert response.json() == {"ok": True}
    (request,) = seen
    assert str(request.url) == "https://api.example.test/ping?page=1"
    assert request.headers["Authorization"] == "Bearer abc"


def test_client_retries_server_errors() -> None:
    statuses = [503, 200]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(statuses.pop(0))

    response = _run(_config(), httpx.MockTransport(handler))

    assert response.status_code == 200
    assert statuses == []


def test_client_does_not_retry_client_errors() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(404)

    response = _run(_config(ratelimit=None), httpx.MockTransport(handler))

    assert response.status_code == 404
    assert calls == 1
