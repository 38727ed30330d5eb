'''
Unit tests for the cookie credential store.
'''

from __future__ import annotations

import time

from itsdangerous import TimestampSigner
from starlette.responses import Response

from authgate.auth import CookieCredentialStore
from authgate.core.config import CookieConfig
from authgate.models import Credential

from helpers import make_request, signed_cookie


def set_cookie_headers(response: Response) -> list[str]:
    return response.headers.getlist('set-cookie')


def cookie_value(header: str) -> str:
    return header.split(';', 1)[0].split('=', 1)[1]


class TestRead:
    '''
    Test reading the credential cookie.
    '''

    def test_read_without_cookie(self, cookie_config: CookieConfig) -> None:
        '''
        Test that no cookie reads as no credential.
        '''
        store = CookieCredentialStore(make_request(), cookie_config)

        assert store.read() is None

    def test_read_signed_cookie(self, cookie_config: CookieConfig) -> None:
        '''
        Test that a correctly signed cookie yields its credential.
        '''
        value = signed_cookie('abc123', cookie_config)
        store = CookieCredentialStore(make_request(f'github_token={value}'), cookie_config)

        assert store.read() == Credential(value='abc123')

    def test_read_unsigned_cookie(self, cookie_config: CookieConfig) -> None:
        '''
        Test that a raw token placed in the cookie is ignored.
        '''
        store = CookieCredentialStore(make_request('github_token=abc123'), cookie_config)

        assert store.read() is None

    def test_read_cookie_signed_with_other_key(self, cookie_config: CookieConfig) -> None:
        '''
        Test that a cookie signed with a different secret is ignored.
        '''
        other = CookieConfig(secret_key='another-secret')
        value = signed_cookie('abc123', other)
        store = CookieCredentialStore(make_request(f'github_token={value}'), cookie_config)

        assert store.read() is None

    def test_read_expired_cookie(self, cookie_config: CookieConfig) -> None:
        '''
        Test that a cookie older than its TTL is ignored.
        '''
        store = CookieCredentialStore(make_request(), cookie_config)

        class PastSigner(TimestampSigner):
            def get_timestamp(self) -> int:
                return int(time.time()) - cookie_config.max_age - 60

        stale = PastSigner('test-secret', salt=store.signer.salt).sign('abc123').decode('utf-8')
        store = CookieCredentialStore(make_request(f'github_token={stale}'), cookie_config)

        assert store.read() is None

    def test_read_reflects_pending_mutations(self, cookie_config: CookieConfig) -> None:
        '''
        Test that writes and clears are visible to later reads in the same request.
        '''
        value = signed_cookie('abc123', cookie_config)
        store = CookieCredentialStore(make_request(f'github_token={value}'), cookie_config)

        store.clear()
        assert store.read() is None

        store.write(Credential(value='new-token'))
        assert store.read() == Credential(value='new-token')


class TestCommit:
    '''
    Test applying store mutations to responses.
    '''

    def test_commit_write_sets_cookie_attributes(self, cookie_config: CookieConfig) -> None:
        '''
        Test that a written credential is sent http-only, lax, secure, for 24 hours.
        '''
        store = CookieCredentialStore(make_request(), cookie_config)
        store.write(Credential(value='abc123'))
        response = Response()

        store.commit(response)

        headers = set_cookie_headers(response)
        assert len(headers) == 1
        header = headers[0].lower()
        assert header.startswith('github_token=')
        assert 'max-age=86400' in header
        assert 'httponly' in header
        assert 'samesite=lax' in header
        assert 'secure' in header
        assert 'path=/' in header

    def test_committed_cookie_reads_back(self, cookie_config: CookieConfig) -> None:
        '''
        Test that the cookie written by one request is accepted by the next.
        '''
        store = CookieCredentialStore(make_request(), cookie_config)
        store.write(Credential(value='abc123'))
        response = Response()
        store.commit(response)

        value = cookie_value(set_cookie_headers(response)[0])
        assert value != 'abc123'

        next_store = CookieCredentialStore(make_request(f'github_token={value}'), cookie_config)
        assert next_store.read() == Credential(value='abc123')

    def test_commit_clear_expires_cookie(self, cookie_config: CookieConfig) -> None:
        '''
        Test that clearing emits an immediately expiring cookie.
        '''
        store = CookieCredentialStore(make_request('github_token=whatever'), cookie_config)
        store.clear()
        response = Response()

        store.commit(response)

        header = set_cookie_headers(response)[0].lower()
        assert header.startswith('github_token=')
        assert 'max-age=0' in header
        assert 'httponly' in header

    def test_last_mutation_wins(self, cookie_config: CookieConfig) -> None:
        '''
        Test that only the final mutation reaches the response.
        '''
        store = CookieCredentialStore(make_request(), cookie_config)
        store.write(Credential(value='first'))
        store.clear()
        store.write(Credential(value='second'))
        response = Response()

        store.commit(response)

        headers = set_cookie_headers(response)
        assert len(headers) == 1
        next_store = CookieCredentialStore(
            make_request(f'github_token={cookie_value(headers[0])}'), cookie_config
        )
        assert next_store.read() == Credential(value='second')

    def test_commit_without_mutation(self, cookie_config: CookieConfig) -> None:
        '''
        Test that an untouched store leaves the response alone.
        '''
        value = signed_cookie('abc123', cookie_config)
        store = CookieCredentialStore(make_request(f'github_token={value}'), cookie_config)
        store.read()
        response = Response()

        store.commit(response)

        assert set_cookie_headers(response) == []

    def test_insecure_toggle(self) -> None:
        '''
        Test that the development toggle drops the Secure attribute.
        '''
        config = CookieConfig(secret_key='test-secret', secure=False)
        store = CookieCredentialStore(make_request(), config)
        store.write(Credential(value='abc123'))
        response = Response()

        store.commit(response)

        assert 'secure' not in set_cookie_headers(response)[0].lower()
