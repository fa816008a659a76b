"""SSL contexts that resume TLS sessions through a pluggable session cache."""
import logging
import ssl

from .models import TransportProfile
from .session_cache import LRUSessionCache, NullSessionCache, SessionCache


# Configure logging
logger = logging.getLogger(__name__)


class ResumingSSLSocket(ssl.SSLSocket):
    """SSLSocket that hands its session to the context cache when it closes.

    TLS 1.3 servers send session tickets after the handshake, so the session
    only becomes resumable once the first response has been read.
    """

    def _real_close(self):
        if not self.server_side:
            session = self.session
            if session is not None:
                self.context.session_cache.put(self.server_hostname or "", session)
        super()._real_close()


class ResumingSSLContext(ssl.SSLContext):
    """SSLContext that offers cached sessions when wrapping client sockets.

    ``ssl.SSLContext.__new__`` takes the protocol as its first argument, so the
    cache is attached after construction (see ``build_ssl_context``).
    """

    sslsocket_class = ResumingSSLSocket
    session_cache: SessionCache = NullSessionCache()

    def wrap_socket(self, sock, server_side=False, do_handshake_on_connect=True,
                    suppress_ragged_eofs=True, server_hostname=None, session=None):
        key = server_hostname or ""
        if session is None and not server_side:
            session = self.session_cache.get(key)

        ssl_sock = super().wrap_socket(
            sock,
            server_side=server_side,
            do_handshake_on_connect=do_handshake_on_connect,
            suppress_ragged_eofs=suppress_ragged_eofs,
            server_hostname=server_hostname,
            session=session,
        )

        if not server_side and do_handshake_on_connect:
            logger.debug(f"TLS handshake with {key}: session reused={ssl_sock.session_reused}")
        return ssl_sock


def build_ssl_context(profile: TransportProfile) -> ResumingSSLContext:
    """Create the SSL context for a profile.

    Profiles with resumption enabled share sessions through a one-slot LRU
    cache. Profiles with resumption disabled get a cache that never returns a
    session, and the client stops advertising session ticket support.
    """
    context = ResumingSSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.load_default_certs()

    if profile.session_resumption_disabled:
        context.session_cache = NullSessionCache()
        context.options |= ssl.OP_NO_TICKET
    else:
        context.session_cache = LRUSessionCache()
    return context
