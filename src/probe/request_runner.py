"""Issues sequential timed requests for a single transport profile."""
import logging
import time
from typing import Callable

import requests

from .constants import ProbeConstants
from .exceptions import RequestError
from .models import RunConfig, RunResult
from .moving_average import MovingAverage


# Configure logging
logger = logging.getLogger(__name__)


class RequestRunner:
    """Handles request execution and timing for one profile run."""

    def __init__(self, sleep_func: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.perf_counter):
        self.sleep_func = sleep_func
        self.clock = clock

    def run(self, session: requests.Session, run_config: RunConfig, label: str) -> RunResult:
        """
        Send ``run_config.requests`` HEAD requests one after another and average their latency.

        Args:
            session: Client configured for the profile under test.
            run_config: Target and pacing of the run.
            label: Profile label, sent in the User-Agent header.

        Returns:
            RunResult with the average duration in seconds.

        Raises:
            RequestError: If any request fails.
        """
        logger.debug(f"config: {run_config}")

        request = requests.Request(
            ProbeConstants.REQUEST_METHOD,
            run_config.url,
            headers={"User-Agent": ProbeConstants.USER_AGENT_PREFIX + label},
        )
        prepared = session.prepare_request(request)

        durations = []
        for count in range(run_config.requests):
            start_time = self.clock()
            try:
                response = session.send(prepared, stream=True, allow_redirects=False)
            except requests.RequestException as e:
                logger.error(f"Request failed: {e}")
                raise RequestError(f"Request to {run_config.url} failed") from e
            duration = self.clock() - start_time

            # The connection only goes back to the pool once the body is consumed
            self._drain(response)

            durations.append(duration)
            logger.debug(f"count: {count}")
            logger.debug(f"duration: {duration:.6f}s (status {response.status_code})")

            logger.debug(f"sleeping for {run_config.sleep}s")
            self.sleep_func(run_config.sleep)

        moving_average = MovingAverage(len(durations))
        moving_average.add(*durations)
        return RunResult(label=label, average=moving_average.avg(), samples=durations)

    @staticmethod
    def _drain(response: requests.Response) -> None:
        """Read and discard the whole response body, then close it."""
        try:
            for _ in response.iter_content(chunk_size=ProbeConstants.DRAIN_CHUNK_SIZE):
                pass
        except requests.RequestException as e:
            logger.error(f"Reading response body failed: {e}")
            raise RequestError(f"Reading response from {response.url} failed") from e
        finally:
            response.close()
