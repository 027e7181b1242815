"""Application settings.

Values come from explicit arguments first, then ``PLAN_SERVER_*``
environment variables, then the defaults below.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, PositiveFloat

ENV_PLANS_DIR = "PLAN_SERVER_PLANS_DIR"
ENV_POLL_INTERVAL = "PLAN_SERVER_POLL_INTERVAL"
ENV_LOG_FILE = "PLAN_SERVER_LOG_FILE"

DEFAULT_PLANS_DIR = Path(".cursor/plans")


class AppSettings(BaseModel, frozen=True):
    plans_dir: Path = Field(default=DEFAULT_PLANS_DIR, description="Directory holding plan files")
    server_name: str = "plan-tool-server"
    server_version: str = "1.0.0"
    watch_poll_interval: PositiveFloat = Field(
        default=1.0, description="Seconds between plan directory scans"
    )
    ui_suppression_delay: float = Field(
        default=0.1, ge=0, description="Pause after swallowing a self-caused file event"
    )
    log_file: Path = Path("plan-server.log")


def load_settings(plans_dir: Path | None = None, log_file: Path | None = None) -> AppSettings:
    values: dict[str, object] = {}

    env_plans_dir = os.environ.get(ENV_PLANS_DIR)
    if plans_dir is not None:
        values["plans_dir"] = plans_dir
    elif env_plans_dir:
        values["plans_dir"] = Path(env_plans_dir).expanduser()

    env_poll = os.environ.get(ENV_POLL_INTERVAL)
    if env_poll:
        try:
            values["watch_poll_interval"] = float(env_poll)
        except ValueError as e:
            raise ValueError(f"{ENV_POLL_INTERVAL} must be a number, got '{env_poll}'") from e

    env_log_file = os.environ.get(ENV_LOG_FILE)
    if log_file is not None:
        values["log_file"] = log_file
    elif env_log_file:
        values["log_file"] = Path(env_log_file).expanduser()

    return AppSettings.model_validate(values)
