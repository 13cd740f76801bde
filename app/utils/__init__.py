from .logger import setup_logger, get_logger
from .clock import utcnow, to_timestamp

__all__ = [
    'setup_logger', 'get_logger',
    'utcnow', 'to_timestamp'
]
