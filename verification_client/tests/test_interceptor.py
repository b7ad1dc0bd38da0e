"""
Unit tests for the credential interceptor.
"""

import pytest
import httpx
from unittest.mock import AsyncMock

from shared.test_helpers import FakeCredentialStore, RedirectRecorder
from verification_client.app.adapters.interceptor import CredentialInterceptor


def make_response(status_code: int) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        request=httpx.Request("POST", "http://localhost:9091/api/auth/verify-face/u1"),
    )


class TestCredentialInterceptor:
    """Test cases for CredentialInterceptor."""

    @pytest.fixture
    def store(self):
        return FakeCredentialStore(token="token-abc")

    @pytest.fixture
    def recorder(self):
        return RedirectRecorder()

    @pytest.fixture
    def interceptor(self, store, recorder):
        return CredentialInterceptor(store, on_session_reset=recorder)

    @pytest.mark.asyncio
    async def test_attaches_bearer_token(self, interceptor):
        request = httpx.Request("GET", "http://localhost:9091/api/auth/health")

        await interceptor.on_request(request)

        assert request.headers["Authorization"] == "Bearer token-abc"

    @pytest.mark.asyncio
    async def test_no_token_leaves_request_untouched(self, interceptor, store):
        store.token = None
        request = httpx.Request("GET", "http://localhost:9091/api/auth/health")

        await interceptor.on_request(request)

        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_401_clears_token_and_redirects_once(self, interceptor, store, recorder):
        await interceptor.on_response(make_response(401))

        assert store.token is None
        assert store.calls.count("clear") == 1
        assert recorder.redirects == ["/login"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [200, 400, 403, 500])
    async def test_other_statuses_are_ignored(self, interceptor, store, recorder, status_code):
        await interceptor.on_response(make_response(status_code))

        assert store.token == "token-abc"
        assert recorder.redirects == []

    @pytest.mark.asyncio
    async def test_async_session_reset_callback_is_awaited(self, store):
        callback = AsyncMock()
        interceptor = CredentialInterceptor(store, on_session_reset=callback, login_path="/signin")

        await interceptor.on_response(make_response(401))

        callback.assert_awaited_once_with("/signin")

    @pytest.mark.asyncio
    async def test_reset_without_callback_still_clears(self, store):
        interceptor = CredentialInterceptor(store)

        await interceptor.reset_session()

        assert store.token is None

    @pytest.mark.asyncio
    async def test_failing_sync_callback_does_not_escape(self, store):
        def router_not_ready(login_path):
            raise RuntimeError("router not ready")

        interceptor = CredentialInterceptor(store, on_session_reset=router_not_ready)

        await interceptor.on_response(make_response(401))

        assert store.token is None

    @pytest.mark.asyncio
    async def test_failing_async_callback_does_not_escape(self, store):
        callback = AsyncMock(side_effect=RuntimeError("router not ready"))
        interceptor = CredentialInterceptor(store, on_session_reset=callback)

        await interceptor.reset_session()

        callback.assert_awaited_once_with("/login")
        assert store.token is None

    def test_event_hooks(self, interceptor):
        hooks = interceptor.event_hooks()

        assert hooks["request"] == [interceptor.on_request]
        assert hooks["response"] == [interceptor.on_response]
