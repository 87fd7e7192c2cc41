"""CLI package for the masonic calendar."""

import logging
import sys
from pathlib import Path

from masonic_calendar.config import CalendarConfig

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: CalendarConfig | None = None
) -> Path:
    """Send every record to the log file and warnings (or more) to stderr.

    The file under ``config.log_dir`` keeps DEBUG output from the generator,
    such as merge collisions and per-source counts, whatever the console
    level is.

    Args:
        verbose: Show INFO records on the console
        quiet: Only show errors on the console (wins over ``verbose``)
        config: Settings for the log location (loaded from the environment if omitted)

    Returns:
        Path of the log file
    """
    config = config or CalendarConfig.from_env()
    log_path = config.log_dir / config.log_filename
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Each invocation replaces the handlers of the previous one
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug(
        f"Settings: output_dir={config.output_dir}, "
        f"default_year={config.default_year or 'current'}, "
        f"upcoming_days={config.upcoming_days}"
    )
    return log_path


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
