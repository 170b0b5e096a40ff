# Core module exports
from . import config
from .logging import (
    JSONFormatter,
    TextFormatter,
    setup_logging,
    get_logger,
)

__all__ = [
    'config',
    'JSONFormatter', 'TextFormatter',
    'setup_logging', 'get_logger',
]
