"""Runtime settings for the command-line tooling."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_MESSAGE_BYTES = 16 * 1024 * 1024
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class VerifierSettings:
    max_message_bytes: int = DEFAULT_MAX_MESSAGE_BYTES
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_message_bytes <= 0:
            raise ValueError("max_message_bytes must be positive")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VerifierSettings":
        env = os.environ if environ is None else environ
        return cls(
            max_message_bytes=int(
                env.get("SCHNORR_MAX_MESSAGE_BYTES", str(DEFAULT_MAX_MESSAGE_BYTES))
            ),
            log_level=env.get("SCHNORR_LOG_LEVEL", "WARNING"),
        )

    def configure_logging(self) -> None:
        logging.basicConfig(level=self.log_level, format=LOG_FORMAT)


__all__ = ["VerifierSettings", "DEFAULT_MAX_MESSAGE_BYTES", "LOG_FORMAT"]
