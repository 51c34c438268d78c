from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from ._utils.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    ENV_DEBUG,
    ENV_FOLLOW_REDIRECTS,
    ENV_LOGGING_ENABLED,
    ENV_TIMEOUT,
)


class Config(BaseModel):
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    follow_redirects: bool = True
    logging_enabled: bool = True
    debug: bool = False

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """Build a configuration from the environment.

        A ``.env`` file is loaded first; variables already set in the process
        take precedence. Unset variables keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        load_dotenv(dotenv_path=dotenv_path)

        values = {
            "timeout": env.get(ENV_TIMEOUT),
            "follow_redirects": env.get(ENV_FOLLOW_REDIRECTS),
            "logging_enabled": env.get(ENV_LOGGING_ENABLED),
            "debug": env.get(ENV_DEBUG),
        }
        return cls.model_validate({k: v for k, v in values.items() if v is not None})
