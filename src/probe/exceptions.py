"""Custom exceptions for the latency probe."""


class ProbeError(Exception):
    """Base class for probe failures."""
    pass


class ConfigurationError(ProbeError):
    """Exception raised when the probe is configured incorrectly."""
    pass


class RequestError(ProbeError):
    """Exception raised when a request fails."""
    pass
