from __future__ import annotations

import os
from dataclasses import dataclass, asdict
from functools import lru_cache
from typing import Literal, get_args

from dotenv import load_dotenv

ErrorPolicy = Literal["collect", "propagate", "log"]

ERROR_POLICIES = get_args(ErrorPolicy)


@dataclass
class PubSubSettings:
    """Runtime knobs shared by every publisher, store and registry."""

    error_policy: ErrorPolicy = "collect"  # collect | propagate | log
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.error_policy not in ERROR_POLICIES:
            raise ValueError(
                f"Unknown error policy: {self.error_policy!r} (choose one of {', '.join(ERROR_POLICIES)})"
            )
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "PubSubSettings":
        """Build settings from PUBNET_* environment variables.

        ``env_file`` is only loaded (into ``os.environ``) when a caller passes it.
        """
        if env_file:
            load_dotenv(env_file, override=False)
        return cls(
            error_policy=os.getenv("PUBNET_ERROR_POLICY", "collect").strip().lower(),  # type: ignore[arg-type]
            log_level=os.getenv("PUBNET_LOG_LEVEL", "WARNING"),
        )

    def to_dict(self):
        return asdict(self)


@lru_cache(maxsize=1)
def get_settings() -> PubSubSettings:
    """Process-wide defaults, read once from PUBNET_* variables already in the environment."""
    return PubSubSettings.from_env(env_file=None)
