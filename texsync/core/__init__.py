"""
Core utilities and configuration for the texsync package.
"""

from texsync.core.config import get_config, get_config_value, set_config_value
from texsync.core.logging_config import get_logger, configure_logging
from texsync.core.utils import is_stale, list_source_files
from texsync.core.error_handler import ConversionError, ConfigurationError
