"""Latency probe package initialization."""
from .models import RunConfig, RunResult, TransportProfile
from .constants import ProbeConstants
from .exceptions import ProbeError, ConfigurationError, RequestError
from .session_cache import SessionCache, LRUSessionCache, NullSessionCache
from .tls import ResumingSSLContext, build_ssl_context
from .client_factory import PROFILES, PROFILES_BY_NAME, ClientFactory, NoRedirectSession, ProfileAdapter
from .moving_average import MovingAverage
from .durations import parse_duration, format_duration
from .request_runner import RequestRunner
from .profile_matrix import ProfileMatrix, run_all

__all__ = [
    'RunConfig',
    'RunResult',
    'TransportProfile',
    'ProbeConstants',
    'ProbeError',
    'ConfigurationError',
    'RequestError',
    'SessionCache',
    'LRUSessionCache',
    'NullSessionCache',
    'ResumingSSLContext',
    'build_ssl_context',
    'PROFILES',
    'PROFILES_BY_NAME',
    'ClientFactory',
    'NoRedirectSession',
    'ProfileAdapter',
    'MovingAverage',
    'parse_duration',
    'format_duration',
    'RequestRunner',
    'ProfileMatrix',
    'run_all',
]
