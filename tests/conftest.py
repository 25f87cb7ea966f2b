"""Shared fixtures: a fake remote service and configs pointing at it."""

import pytest

from config import Config
from configs import Answer_Config, Identity_Config
from fakes import GENERATE_WEBHOOK_PATH, Fake_Remote


@pytest.fixture
def identity() -> Identity_Config:
    return Identity_Config('John Doe', 'REG12347', 'john@example.com')


@pytest.fixture
def fake_remote() -> Fake_Remote:
    return Fake_Remote()


@pytest.fixture
async def remote_server(aiohttp_server, fake_remote: Fake_Remote):
    return await aiohttp_server(fake_remote.app())


@pytest.fixture
def make_config(remote_server, identity: Identity_Config):
    def make(timeout: float = 5.0, url: str | None = None) -> Config:
        return Config(url or str(remote_server.make_url(GENERATE_WEBHOOK_PATH)),
                      identity,
                      timeout,
                      Answer_Config(None, None),
                      'test')

    return make
