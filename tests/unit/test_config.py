'''
Unit tests for AuthGate configuration.
'''

from __future__ import annotations

import pytest

from authgate.core.config import CookieConfig, GitHubConfig, LoggingConfig, Settings


class TestDefaults:
    '''
    Test default configuration values.
    '''

    def test_cookie_defaults(self) -> None:
        '''
        Test that the credential cookie defaults to a secure 24 hour cookie.
        '''
        config = CookieConfig()

        assert config.name == 'github_token'
        assert config.max_age == 86400
        assert config.secure is True
        assert config.same_site == 'lax'
        assert config.domain is None

    def test_github_defaults(self) -> None:
        '''
        Test the GitHub endpoint defaults.
        '''
        config = GitHubConfig()

        assert config.token_url == 'https://github.com/login/oauth/access_token'
        assert config.api_base_url == 'https://api.github.com'
        assert config.user_agent == 'MCP-Orchestrator'
        assert config.timeout == 5.0


class TestValidation:
    '''
    Test configuration validation.
    '''

    def test_invalid_same_site(self) -> None:
        '''
        Test that an unknown SameSite value is rejected.
        '''
        with pytest.raises(ValueError):
            CookieConfig(same_site='sometimes')

    def test_same_site_normalized(self) -> None:
        '''
        Test that SameSite is lowercased.
        '''
        assert CookieConfig(same_site='Strict').same_site == 'strict'

    def test_cookie_lifetime_bounds(self) -> None:
        '''
        Test that the credential lifetime cannot exceed 24 hours.
        '''
        with pytest.raises(ValueError):
            CookieConfig(max_age=86401)

    def test_invalid_environment(self) -> None:
        '''
        Test that an unknown environment is rejected.
        '''
        with pytest.raises(ValueError):
            Settings(environment='moon')

    def test_invalid_log_level(self) -> None:
        '''
        Test that an unknown log level is rejected.
        '''
        with pytest.raises(ValueError):
            LoggingConfig(level='LOUD')

    def test_api_base_url_trailing_slash(self) -> None:
        '''
        Test that a trailing slash on the API base URL is dropped.
        '''
        assert GitHubConfig(api_base_url='https://github.example.com/api/v3/').api_base_url == (
            'https://github.example.com/api/v3'
        )

    def test_production_requires_secure_cookie(self) -> None:
        '''
        Test that production refuses a cookie without the Secure attribute.
        '''
        with pytest.raises(ValueError):
            Settings(
                environment='production',
                cookie=CookieConfig(secure=False, secret_key='secret'),
            )

    def test_production_requires_secret_key(self) -> None:
        '''
        Test that production refuses to sign cookies with a per-process key.
        '''
        with pytest.raises(ValueError):
            Settings(environment='production', cookie=CookieConfig(secret_key=None))

    def test_development_allows_insecure_cookie(self) -> None:
        '''
        Test that local development may disable the Secure attribute.
        '''
        settings = Settings(environment='development', cookie=CookieConfig(secure=False))

        assert settings.cookie.secure is False


class TestRedirect:
    '''
    Test the post-login redirect URL.
    '''

    def test_redirect_appends_query(self) -> None:
        '''
        Test that the marker is added as a query string.
        '''
        settings = Settings(frontend_url='https://app.example.com/')

        assert settings.login_redirect_url == 'https://app.example.com?authed=1'

    def test_redirect_extends_existing_query(self) -> None:
        '''
        Test that an existing query string is extended.
        '''
        settings = Settings(frontend_url='https://app.example.com/?tab=home')

        assert settings.login_redirect_url == 'https://app.example.com/?tab=home&authed=1'


class TestEnvironment:
    '''
    Test loading from environment variables.
    '''

    def test_github_credentials_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        '''
        Test that GITHUB_ prefixed variables populate the GitHub config.
        '''
        monkeypatch.setenv('GITHUB_CLIENT_ID', 'env-client-id')
        monkeypatch.setenv('GITHUB_CLIENT_SECRET', 'env-client-secret')

        settings = Settings()

        assert settings.github.client_id == 'env-client-id'
        assert settings.github.client_secret == 'env-client-secret'

    def test_cookie_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        '''
        Test that COOKIE_ prefixed variables populate the cookie config.
        '''
        monkeypatch.setenv('COOKIE_SECURE', 'false')
        monkeypatch.setenv('COOKIE_SECRET_KEY', 'env-secret')

        settings = Settings()

        assert settings.cookie.secure is False
        assert settings.cookie.secret_key == 'env-secret'
