"""Data models for the latency probe."""
from dataclasses import dataclass, field, replace
from typing import List

from .constants import ProbeConstants
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class RunConfig:
    """Configuration for one protocol pass over the profile matrix."""
    host: str = ProbeConstants.DEFAULT_HOST
    protocol: str = "http"
    requests: int = ProbeConstants.DEFAULT_REQUESTS
    sleep: float = ProbeConstants.DEFAULT_SLEEP  # seconds

    def __post_init__(self):
        if self.protocol not in ProbeConstants.PROTOCOLS:
            raise ConfigurationError(f"Unsupported protocol: {self.protocol}")
        if self.requests < 1:
            raise ConfigurationError(f"Request count must be positive, got {self.requests}")
        if self.sleep < 0:
            raise ConfigurationError(f"Sleep must not be negative, got {self.sleep}")

    @property
    def url(self) -> str:
        return f"{self.protocol}://{self.host}"

    def with_protocol(self, protocol: str) -> "RunConfig":
        """Return a copy of this config targeting another protocol."""
        return replace(self, protocol=protocol)


@dataclass(frozen=True)
class TransportProfile:
    """A named combination of keep-alive and TLS session resumption settings."""
    name: str
    title: str
    keepalive_disabled: bool = False
    session_resumption_disabled: bool = False
    https_only: bool = False

    @property
    def label(self) -> str:
        return "run_" + self.name.replace("-", "_")


@dataclass
class RunResult:
    """Average duration measured for a single profile."""
    label: str
    average: float  # seconds
    samples: List[float] = field(default_factory=list)

    @property
    def average_ms(self) -> float:
        return self.average * 1000.0
