"""Shared utilities for Filament Hub."""

import logging
import time
from pathlib import Path
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

# Rich console for pretty output
console = Console()


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set up logging with Rich handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    return logging.getLogger("filament_hub")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(f"filament_hub.{name}")


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure a directory exists and return the Path."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def timestamp_ms() -> int:
    """Current wall-clock time in milliseconds."""
    return int(time.time() * 1000)
