"""Builds one HTTP client per transport profile."""
import logging
from typing import Dict, List

import requests
from requests.adapters import HTTPAdapter

from .exceptions import ConfigurationError
from .models import TransportProfile
from .tls import build_ssl_context


# Configure logging
logger = logging.getLogger(__name__)


PROFILES: List[TransportProfile] = [
    TransportProfile("default", "default"),
    TransportProfile("no-keepalive", "no keepalive", keepalive_disabled=True),
    TransportProfile("no-session-resume", "no session resume",
                     session_resumption_disabled=True, https_only=True),
    TransportProfile("no-session-resume-and-no-keepalive", "no session resume and no keepalive",
                     keepalive_disabled=True, session_resumption_disabled=True, https_only=True),
]

PROFILES_BY_NAME: Dict[str, TransportProfile] = {profile.name: profile for profile in PROFILES}


class NoRedirectSession(requests.Session):
    """Session that hands back redirect responses instead of following them."""

    def resolve_redirects(self, resp, req, **kwargs):
        return iter(())


class ProfileAdapter(HTTPAdapter):
    """HTTPAdapter whose connection pools use a profile specific SSL context."""

    def __init__(self, ssl_context=None, **kwargs):
        self.ssl_context = ssl_context
        kwargs.setdefault("max_retries", 0)
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        if self.ssl_context is not None:
            pool_kwargs["ssl_context"] = self.ssl_context
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)


class ClientFactory:
    """Creates HTTP clients configured for a transport profile."""

    @staticmethod
    def create_session(profile: TransportProfile, protocol: str) -> requests.Session:
        """Create a session for a profile.

        Args:
            profile: Transport profile to apply.
            protocol: ``http`` or ``https``.

        Returns:
            A fresh session with its own adapter, SSL context and session cache.

        Raises:
            ConfigurationError: If the profile only applies to https.
        """
        if profile.https_only and protocol != "https":
            raise ConfigurationError(f"Profile {profile.name} requires https, got {protocol}")

        session = NoRedirectSession()
        if profile.keepalive_disabled:
            session.headers["Connection"] = "close"

        if protocol == "https":
            adapter = ProfileAdapter(ssl_context=build_ssl_context(profile))
        else:
            adapter = ProfileAdapter()
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        logger.debug(
            f"Created client for profile {profile.name} ({protocol}): "
            f"keepalive_disabled={profile.keepalive_disabled}, "
            f"session_resumption_disabled={profile.session_resumption_disabled}"
        )
        return session
