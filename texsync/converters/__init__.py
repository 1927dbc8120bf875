"""
Converters used to rasterize and scale assets.

This module provides the converter interface, its implementations, and a
factory that builds one from configuration.
"""

from typing import Dict, Any, Optional

from texsync.converters.base import ImageConverter
from texsync.converters.command_line import CommandLineConverter
from texsync.converters.in_process import InProcessConverter
from texsync.core.config import get_config_value
from texsync.core.constants import DEFAULT_BACKEND, SUPPORTED_BACKENDS
from texsync.core.error_handler import ConfigurationError

def create_converter(backend: Optional[str] = None, config: Optional[Dict[str, Any]] = None) -> ImageConverter:
    """
    Create a converter for the given backend.

    Args:
        backend (str, optional): "command" or "python"; defaults to converter.backend
        config (Dict[str, Any], optional): Configuration to read command templates from

    Returns:
        ImageConverter: The converter

    Raises:
        ConfigurationError: If the backend is unknown
    """
    if backend is None:
        backend = get_config_value("converter.backend", DEFAULT_BACKEND, config=config)

    if backend == "command":
        return CommandLineConverter(
            rasterize_command=get_config_value("converter.rasterize_command", None, config=config),
            scale_command=get_config_value("converter.scale_command", None, config=config)
        )
    if backend == "python":
        return InProcessConverter()

    raise ConfigurationError(
        message=f"Unknown converter backend '{backend}'. Supported backends are: {', '.join(SUPPORTED_BACKENDS)}",
        component="converter",
        invalid_keys=["converter.backend"]
    )
