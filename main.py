"""Command line entry point for the latency probe."""

from typing import Optional

import typer
from pydantic import ValidationError

from src.probe import ConfigurationError, ProbeConstants, RequestError, RunConfig, run_all
from src.probe.durations import format_duration, parse_duration
from src.shared.config import Config
from src.shared.logging import LoggingManager

app = typer.Typer(help="Measure HTTP and HTTPS latency with and without keep-alive and TLS session resumption")


def _parse_sleep(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return parse_duration(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _with_default(text: str, default) -> str:
    return f"{text} (default: {default})"


@app.command()
def probe(
    host: Optional[str] = typer.Option(None, help=_with_default("the host to connect to", ProbeConstants.DEFAULT_HOST)),
    requests: Optional[int] = typer.Option(None, min=1, help=_with_default("the number of requests to send", ProbeConstants.DEFAULT_REQUESTS)),
    sleep: Optional[str] = typer.Option(None, help=_with_default("sleep duration between requests", format_duration(ProbeConstants.DEFAULT_SLEEP))),
    loglevel: Optional[str] = typer.Option(None, help=_with_default("the loglevel for the logger", ProbeConstants.DEFAULT_LOG_LEVEL)),
) -> None:
    """Run every transport profile over http, then over https."""
    overrides = {
        "host": host,
        "requests": requests,
        "sleep": _parse_sleep(sleep),
        "loglevel": loglevel,
    }
    try:
        config = Config(**{key: value for key, value in overrides.items() if value is not None})
        LoggingManager.setup_logging(config.loglevel, config)
        run_config = RunConfig(host=config.host, requests=config.requests, sleep=config.sleep)
    except (ConfigurationError, ValidationError) as e:
        typer.echo(f"can not parse configuration: {e}", err=True)
        raise typer.Exit(code=2)

    logger = LoggingManager.get_logger(__name__)
    try:
        run_all(run_config, echo=typer.echo)
    except RequestError as e:
        logger.error(f"Probe aborted: {e.__cause__ or e}")
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
