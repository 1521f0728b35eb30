"""Configuration module for fncombinators.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru output and enable the library's log records

Usage:
------
```python
from fncombinators.config import settings
cap = settings.flow.until_max_iterations

from fncombinators.config import get_logger
logger = get_logger(__name__)
logger.debug("Starting operation")
```
"""

from .logging import configure_library_logging, get_logger, setup_loguru_logger
from .settings import settings

__all__ = [
    "configure_library_logging",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
