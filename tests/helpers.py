'''
Recording fakes and request helpers shared by the AuthGate tests.
'''

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from starlette.requests import Request

from authgate.auth import CookieCredentialStore
from authgate.core.config import CookieConfig
from authgate.models import Credential, Profile


Outcome = Union[Any, BaseException]


def make_request(cookie_header: Optional[str] = None) -> Request:
    '''
    Build a bare HTTP request carrying an optional Cookie header.
    '''
    headers = []
    if cookie_header:
        headers.append((b'cookie', cookie_header.encode('latin-1')))
    return Request({'type': 'http', 'method': 'GET', 'path': '/', 'headers': headers})


def signed_cookie(value: str, config: CookieConfig) -> str:
    '''
    Produce the cookie value the store would have written for ``value``.
    '''
    store = CookieCredentialStore(make_request(), config)
    return store.signer.sign(value).decode('utf-8')


class RecordingStore:
    '''
    In-memory credential store that records every call.
    '''

    def __init__(self, credential: Optional[Credential] = None, calls: Optional[List[str]] = None):
        self.credential = credential
        self.calls = calls if calls is not None else []

    def read(self) -> Optional[Credential]:
        self.calls.append('store.read')
        return self.credential

    def write(self, credential: Credential) -> None:
        self.calls.append('store.write')
        self.credential = credential

    def clear(self) -> None:
        self.calls.append('store.clear')
        self.credential = None

    @property
    def clear_count(self) -> int:
        return self.calls.count('store.clear')

    @property
    def write_count(self) -> int:
        return self.calls.count('store.write')


class FakeProvider:
    '''
    Stand-in for GitHubOAuthClient returning or raising preset outcomes.
    '''

    def __init__(
        self,
        calls: Optional[List[str]] = None,
        exchange: Outcome = None,
        profile: Outcome = None,
        revoke: Outcome = None,
    ):
        self.calls = calls if calls is not None else []
        self.outcomes = {'exchange': exchange, 'profile': profile, 'revoke': revoke}
        self.arguments: List[Tuple[str, Any]] = []

    def _resolve(self, name: str, argument: Any) -> Any:
        self.calls.append(f'provider.{name}')
        self.arguments.append((name, argument))
        outcome = self.outcomes[name]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def exchange_code(self, code: str) -> Credential:
        return self._resolve('exchange', code)

    async def fetch_profile(self, credential: Credential) -> Profile:
        return self._resolve('profile', credential)

    async def revoke(self, credential: Credential) -> None:
        return self._resolve('revoke', credential)

    @property
    def network_calls(self) -> List[str]:
        return [call for call in self.calls if call.startswith('provider.')]


class RecordingLogger:
    '''
    Captures structured log calls made through a bound logger.
    '''

    def __init__(self):
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kwargs: Any) -> None:
        self.records.append((level, event, kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        self._record('debug', event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._record('info', event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._record('warning', event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._record('error', event, **kwargs)

    def auth_events(self, event_type: str) -> List[Tuple[str, Dict[str, Any]]]:
        return [
            (level, kwargs)
            for level, _, kwargs in self.records
            if kwargs.get('event_type') == event_type
        ]
