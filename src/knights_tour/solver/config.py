"""Knight's tour solver configuration."""

from typing import Literal

from dotenv import find_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the knight's tour solver.

    Each setting can be given as an environment variable prefixed with `KNIGHTS_TOUR_`
    (e.g. `KNIGHTS_TOUR_BOARD_SIZE=6`), either in the environment or in a `.env` file.
    """

    board_size: int = Field(default=8, ge=1)
    """Side length of the square board. Default: 8."""

    start_x: int = Field(default=3, ge=0)
    """Column of the starting square. Default: 3."""

    start_y: int = Field(default=2, ge=0)
    """Row of the starting square. Default: 2."""

    require_closed: bool = True
    """Whether only closed tours count as a solution. Default: True.

    If False, a tour that covers every square but does not return to the start is accepted.
    """

    max_attempts: int | None = Field(default=None, ge=1)
    """Maximum number of attempts before giving up. If None (default), retry forever."""

    seed: int | None = None
    """Seed for the tie-breaking random source. If None (default), use OS entropy."""

    rotation_range: int = Field(default=1000, ge=1)
    """Upper bound (exclusive) of the random rotation offset. Default: 1000."""

    log_dir: str = "logs"
    """Directory for run transcripts. Default: "logs"."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    """Console logging level. Default: "WARNING"."""

    model_config = SettingsConfigDict(
        env_prefix="KNIGHTS_TOUR_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_start(self) -> "SolverConfig":
        if self.start_x >= self.board_size or self.start_y >= self.board_size:
            raise ValueError(
                f"Start square ({self.start_x}, {self.start_y}) is outside the "
                f"{self.board_size}x{self.board_size} board."
            )
        return self

