import json
from pathlib import Path
from typing import Dict, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.probe.constants import ProbeConstants
from src.probe.durations import parse_duration


class Config(BaseSettings):
    """Global configuration settings for the latency probe."""

    host: str = ProbeConstants.DEFAULT_HOST
    requests: int = ProbeConstants.DEFAULT_REQUESTS
    sleep: float = ProbeConstants.DEFAULT_SLEEP
    loglevel: str = ProbeConstants.DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = {
        "urllib3": "WARNING",
        "urllib3.connectionpool": "WARNING",
    }

    model_config = SettingsConfigDict(
        env_prefix='LATENCY_PROBE_',
    )

    @field_validator("sleep", mode="before")
    @classmethod
    def parse_sleep(cls, value: Any) -> Any:
        """Accept durations such as ``1000ms`` as well as plain seconds."""
        if isinstance(value, str):
            return parse_duration(value)
        return value

    @field_validator("requests")
    @classmethod
    def check_requests(cls, value: int) -> int:
        if value < 1:
            raise ValueError("requests must be a positive integer")
        return value

    @field_validator("sleep")
    @classmethod
    def check_sleep(cls, value: float) -> float:
        if value < 0:
            raise ValueError("sleep must not be negative")
        return value

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path("config.json")
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
