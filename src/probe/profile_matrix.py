"""Runs the transport profile matrix for a protocol and prints the averages."""
import logging
from typing import Callable, List, Optional, Sequence

from .client_factory import PROFILES, ClientFactory
from .constants import ProbeConstants
from .durations import format_duration
from .models import RunConfig, RunResult, TransportProfile
from .request_runner import RequestRunner


# Configure logging
logger = logging.getLogger(__name__)


class ProfileMatrix:
    """Orchestrates one runner invocation per applicable profile."""

    def __init__(self, run_config: RunConfig, client_factory: Optional[ClientFactory] = None,
                 runner: Optional[RequestRunner] = None, echo: Callable[[str], None] = print):
        self.run_config = run_config
        self.client_factory = client_factory or ClientFactory()
        self.runner = runner or RequestRunner()
        self.echo = echo

    @staticmethod
    def profiles_for(protocol: str) -> List[TransportProfile]:
        """Return the profiles that apply to a protocol, in run order."""
        return [profile for profile in PROFILES if protocol == "https" or not profile.https_only]

    def run(self) -> List[RunResult]:
        """Run every applicable profile in order.

        A failing request propagates immediately, so later profiles never run.
        """
        protocol = self.run_config.protocol
        self.echo(protocol)

        results = []
        for profile in self.profiles_for(protocol):
            self.echo(profile.title)
            session = self.client_factory.create_session(profile, protocol)
            try:
                result = self.runner.run(session, self.run_config, profile.label)
            finally:
                session.close()

            self.echo(f"avg duration: {format_duration(result.average)}")
            logger.debug(f"{profile.name}: samples={result.samples}")
            results.append(result)
        return results


def run_all(run_config: RunConfig, protocols: Sequence[str] = ProbeConstants.PROTOCOLS,
            runner: Optional[RequestRunner] = None,
            echo: Callable[[str], None] = print) -> List[RunResult]:
    """Run the profile matrix for each protocol in turn."""
    results = []
    for protocol in protocols:
        matrix = ProfileMatrix(run_config.with_protocol(protocol), runner=runner, echo=echo)
        results.extend(matrix.run())
    return results
