"""Constants for the latency probe."""


class ProbeConstants:
    """Centralized constants for probe configuration."""
    DEFAULT_HOST = "ip.thaller.ws"
    DEFAULT_REQUESTS = 10
    DEFAULT_SLEEP = 1.0  # seconds
    DEFAULT_LOG_LEVEL = "info"
    PROTOCOLS = ("http", "https")
    REQUEST_METHOD = "HEAD"
    USER_AGENT_PREFIX = "SSLTest-"
    SESSION_CACHE_SIZE = 1
    DRAIN_CHUNK_SIZE = 8192
