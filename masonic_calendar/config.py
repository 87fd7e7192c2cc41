"""Configuration for the masonic calendar."""

import os
from datetime import date
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from masonic_calendar.constants import ICS_FILENAME_PATTERN, MAX_YEAR, MIN_YEAR


def _env_int(name: str, low: int, high: int | None = None) -> int | None:
    """Integer from the environment, or None when unset, non-numeric or out of range."""
    try:
        value = int(os.environ[name])
    except (KeyError, ValueError):
        return None
    if value < low or (high is not None and value > high):
        return None
    return value


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation."""

    # Storage paths
    output_dir: Path = Field(default=Path("."))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    ics_filename_pattern: str = Field(default=ICS_FILENAME_PATTERN)
    log_filename: str = Field(default="masonic_calendar.log")

    # Defaults
    default_year: int | None = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)
    upcoming_days: int = Field(default=7, ge=1)

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage paths
        if "OUTPUT_DIR" in os.environ:
            config_dict["output_dir"] = Path(os.environ["OUTPUT_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "ICS_FILENAME_PATTERN" in os.environ:
            config_dict["ics_filename_pattern"] = os.environ["ICS_FILENAME_PATTERN"]
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Defaults, out-of-range or non-numeric values are ignored
        default_year = _env_int("DEFAULT_YEAR", MIN_YEAR, MAX_YEAR)
        if default_year is not None:
            config_dict["default_year"] = default_year
        upcoming_days = _env_int("UPCOMING_DAYS", 1)
        if upcoming_days is not None:
            config_dict["upcoming_days"] = upcoming_days

        return cls(**config_dict)

    def resolve_year(self, year: int | None = None) -> int:
        """Return the explicit year, else the configured default, else this year."""
        if year is not None:
            return year
        if self.default_year is not None:
            return self.default_year
        return date.today().year

    def ics_filename(self, year: int) -> str:
        """File name offered for a year's ICS download."""
        return self.ics_filename_pattern.format(year=year)
