from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from tweakcompat.adapters.github import GitHubClient
from tweakcompat.adapters.http_resilience import ResilienceConfig, ResilientClient
from tweakcompat.config.github import GitHubConfig, github_resilience

if TYPE_CHECKING:
    from collections.abc import Callable

type Handler = Callable[[httpx.Request], httpx.Response]


def _make_client_factory(handler: Handler) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(async_handler))

    return factory


@pytest.fixture
def github_config() -> GitHubConfig:
    return GitHubConfig(
        token="test-token",
        owner="acme",
        repo="compat",
        resilience=github_resilience("test-token"),
        per_page=2,
    )


@pytest.fixture
def make_github_client(github_config: GitHubConfig) -> Callable[[Handler], GitHubClient]:
    def make(handler: Handler) -> GitHubClient:
        return GitHubClient(config=github_config, client_factory=_make_client_factory(handler))

    return make
