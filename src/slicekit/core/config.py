import os
from typing import Annotated, Literal, Optional

import annotated_types as at
from pydantic import BaseModel, Field

__all__ = ["Settings", "settings"]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Environment-driven settings for slicekit.

    Attributes:
        LOG_LEVEL: Level of the package logger.
        SHUFFLE_SEED: Seed for a dedicated random source used by ``shuffle``.
            When unset, the process-wide ``random`` source is used.
    """

    LOG_LEVEL: LogLevel = Field(
        "WARNING", description="Level of the 'slicekit' logger."
    )
    SHUFFLE_SEED: Optional[Annotated[int, at.Ge(0)]] = Field(
        None, description="Seed for reproducible shuffles. None uses the global source."
    )

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        log_level = os.getenv("SLICEKIT_LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level.strip().upper()

        shuffle_seed = os.getenv("SLICEKIT_SHUFFLE_SEED")
        if shuffle_seed:
            values["SHUFFLE_SEED"] = shuffle_seed.strip()

        return cls(**values)


settings = Settings.load()
