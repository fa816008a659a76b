"""Unit tests for per-profile client construction."""

import ssl

import pytest

from src.probe.client_factory import PROFILES, PROFILES_BY_NAME, ClientFactory, NoRedirectSession, ProfileAdapter
from src.probe.exceptions import ConfigurationError
from src.probe.session_cache import LRUSessionCache, NullSessionCache
from src.probe.tls import ResumingSSLContext, build_ssl_context

from ..conftest import MockAdapter
from ..test_const import HTTPS_PROFILE_ORDER, TEST_URL_HTTP


class TestProfileTable:
    """Test the profile table."""

    def test_profile_order(self):
        assert [profile.name for profile in PROFILES] == HTTPS_PROFILE_ORDER

    @pytest.mark.parametrize("name,keepalive_disabled,resumption_disabled", [
        ("default", False, False),
        ("no-keepalive", True, False),
        ("no-session-resume", False, True),
        ("no-session-resume-and-no-keepalive", True, True),
    ])
    def test_profile_flags(self, name, keepalive_disabled, resumption_disabled):
        profile = PROFILES_BY_NAME[name]
        assert profile.keepalive_disabled is keepalive_disabled
        assert profile.session_resumption_disabled is resumption_disabled
        assert profile.https_only is resumption_disabled

    def test_labels(self):
        assert PROFILES_BY_NAME["no-session-resume"].label == "run_no_session_resume"


class TestClientFactory:
    """Test ClientFactory.create_session."""

    def test_keepalive_profile_has_no_connection_header(self):
        session = ClientFactory.create_session(PROFILES_BY_NAME["default"], "http")
        assert isinstance(session, NoRedirectSession)
        assert session.headers.get("Connection") != "close"

    def test_no_keepalive_sends_connection_close(self):
        session = ClientFactory.create_session(PROFILES_BY_NAME["no-keepalive"], "http")
        assert session.headers["Connection"] == "close"

    def test_http_adapter_has_no_ssl_context(self):
        session = ClientFactory.create_session(PROFILES_BY_NAME["default"], "http")
        adapter = session.get_adapter(TEST_URL_HTTP)
        assert isinstance(adapter, ProfileAdapter)
        assert adapter.ssl_context is None
        assert adapter.max_retries.total == 0

    def test_https_adapter_gets_profile_context(self):
        session = ClientFactory.create_session(PROFILES_BY_NAME["no-session-resume"], "https")
        adapter = session.get_adapter("https://example.test")
        assert isinstance(adapter.ssl_context, ResumingSSLContext)
        assert adapter.poolmanager.connection_pool_kw["ssl_context"] is adapter.ssl_context
        assert isinstance(adapter.ssl_context.session_cache, NullSessionCache)

    def test_https_only_profile_rejected_for_http(self):
        with pytest.raises(ConfigurationError):
            ClientFactory.create_session(PROFILES_BY_NAME["no-session-resume"], "http")

    def test_fresh_client_per_call(self):
        profile = PROFILES_BY_NAME["default"]
        first = ClientFactory.create_session(profile, "https")
        second = ClientFactory.create_session(profile, "https")
        first_context = first.get_adapter("https://example.test").ssl_context
        second_context = second.get_adapter("https://example.test").ssl_context
        assert first is not second
        assert first_context is not second_context
        assert first_context.session_cache is not second_context.session_cache


class TestNoRedirectSession:
    """Test redirects are returned unfollowed."""

    def test_redirect_is_terminal(self):
        adapter = MockAdapter(script=[302, 200])
        session = NoRedirectSession()
        session.mount("http://", adapter)

        response = session.get(TEST_URL_HTTP)

        assert response.status_code == 302
        assert response.history == []
        assert len(adapter.sent) == 1


class TestBuildSSLContext:
    """Test build_ssl_context."""

    def test_resumption_enabled_uses_single_slot_cache(self):
        context = build_ssl_context(PROFILES_BY_NAME["default"])
        assert isinstance(context.session_cache, LRUSessionCache)
        assert context.session_cache.capacity == 1
        assert not context.options & ssl.OP_NO_TICKET

    def test_resumption_disabled_turns_off_tickets(self):
        context = build_ssl_context(PROFILES_BY_NAME["no-session-resume-and-no-keepalive"])
        assert isinstance(context.session_cache, NullSessionCache)
        assert context.options & ssl.OP_NO_TICKET
