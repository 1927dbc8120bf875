"""
Error handling module.

This module provides the exceptions raised by texsync and the wrapper used to
invoke external conversion tools with consistent error reporting.
"""

import logging
import shlex
import subprocess
from typing import Optional, List, Sequence

from texsync.core.constants import COMMAND_NOT_FOUND_STATUS

logger = logging.getLogger(__name__)

class ConversionError(Exception):
    """
    Exception raised when a conversion tool fails.

    Attributes:
        message: Error message.
        command: Command line that was executed, if any.
        returncode: Exit status of the failing tool.
        source: Source asset being converted.
        stderr: Captured error output of the tool.
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        source: Optional[str] = None,
        stderr: Optional[str] = None
    ):
        """
        Initialize the ConversionError.

        Args:
            message: Error message.
            command: Command line that was executed.
            returncode: Exit status of the failing tool.
            source: Source asset being converted.
            stderr: Captured error output of the tool.
        """
        self.message = message
        self.command = list(command) if command else None
        self.returncode = returncode
        self.source = source
        self.stderr = stderr

        detailed_message = f"Conversion Error: {message}"
        if returncode is not None:
            detailed_message += f" (Exit Status: {returncode})"
        if source:
            detailed_message += f" (Source: {source})"

        super().__init__(detailed_message)


class ConfigurationError(Exception):
    """
    Exception raised for configuration errors.

    Attributes:
        message: Error message.
        component: Component that has a configuration error.
        invalid_keys: Configuration keys with invalid values.
    """

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        invalid_keys: Optional[list] = None
    ):
        """
        Initialize the ConfigurationError.

        Args:
            message: Error message.
            component: Component that has a configuration error.
            invalid_keys: Configuration keys with invalid values.
        """
        self.message = message
        self.component = component
        self.invalid_keys = invalid_keys or []

        detailed_message = f"Configuration Error: {message}"
        if component:
            detailed_message += f" (Component: {component})"
        if invalid_keys:
            detailed_message += f" (Invalid Keys: {', '.join(invalid_keys)})"

        super().__init__(detailed_message)


def format_command(command: Sequence[str]) -> str:
    """
    Render a command line the way a shell would echo it.

    Args:
        command: Command arguments.

    Returns:
        Shell-quoted command string.
    """
    return " ".join(shlex.quote(str(part)) for part in command)


def run_tool_command(command: List[str], source: Optional[str] = None) -> None:
    """
    Run an external conversion tool, logging the command line first.

    Args:
        command: Command arguments; the first one is the executable.
        source: Source asset being converted, for error reporting.

    Raises:
        ConversionError: If the tool cannot be started or exits non-zero.
    """
    logger.info(format_command(command))

    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            universal_newlines=True,
            check=True
        )
    except FileNotFoundError as e:
        raise ConversionError(
            message=f"Executable not found: {command[0]}",
            command=command,
            returncode=COMMAND_NOT_FOUND_STATUS,
            source=source,
            stderr=str(e)
        )
    except subprocess.CalledProcessError as e:
        raise ConversionError(
            message=f"{command[0]} failed",
            command=command,
            returncode=e.returncode,
            source=source,
            stderr=e.stderr
        )

    if result.stdout:
        logger.debug(result.stdout.strip())
    if result.stderr:
        logger.debug(result.stderr.strip())


def log_conversion_error(error: ConversionError) -> None:
    """
    Log a conversion error with detailed information.

    Args:
        error: Conversion error to log.
    """
    logger.error(f"Conversion Error: {error.message}")

    if error.source:
        logger.error(f"Source: {error.source}")

    if error.command:
        logger.error(f"Command: {format_command(error.command)}")

    if error.returncode is not None:
        logger.error(f"Exit Status: {error.returncode}")

    if error.stderr:
        logger.error(f"Tool Output: {error.stderr.strip()}")
