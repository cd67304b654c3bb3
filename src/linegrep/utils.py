"""Environment helpers shared by the CLI and the web service"""

import logging
import os


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_int_env(name: str, default: int) -> int:
    """Read an integer from the environment, falling back to default on bad values."""
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        logger.warning(f'Invalid {name} value {value!r}, using default {default}')
        return default


def get_log_level_name(default: str) -> str:
    return os.getenv('LINEGREP_LOG_LEVEL', default).upper()


def configure_logging(default: str = 'WARNING') -> int:
    """
    Configure root logging from LINEGREP_LOG_LEVEL.

    Unknown level names fall back to the given default.

    Returns:
        The numeric level that was applied
    """
    level = getattr(logging, get_log_level_name(default), None)
    if not isinstance(level, int):
        level = getattr(logging, default.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
