'''
Shared fixtures for AuthGate tests.
'''

from __future__ import annotations

import pytest

from authgate.core.config import CookieConfig, Settings
from authgate.models import Profile


@pytest.fixture
def octocat() -> Profile:
    return Profile(
        login='octocat',
        name='The Octocat',
        avatar_url='https://avatars.githubusercontent.com/u/583231',
        id=583231,
    )


@pytest.fixture
def cookie_config() -> CookieConfig:
    return CookieConfig(secret_key='test-secret')


@pytest.fixture
def test_settings(cookie_config: CookieConfig) -> Settings:
    return Settings(
        environment='testing',
        frontend_url='http://localhost:5173',
        cookie=cookie_config,
    )
