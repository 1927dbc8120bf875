"""
Converter backed by external command-line tools.

By default vectors are rendered with Inkscape and rasters are rescaled with
ImageMagick's ``convert``. Both command lines are templates so other tools
(rsvg-convert, ``magick``, Inkscape 0.92's ``-z -e`` syntax) can be configured.
"""

import os
from typing import Dict, Any, List, Optional

from texsync.converters.base import ImageConverter
from texsync.core.constants import (
    DEFAULT_RASTERIZE_COMMAND,
    DEFAULT_SCALE_COMMAND,
    INKSCAPE_BIN_ENV,
    MAGICK_BIN_ENV,
)
from texsync.core.error_handler import run_tool_command
from texsync.core.logging_config import get_logger

logger = get_logger(__name__)

WIDTH_PLACEHOLDER = "{width}"

class CommandLineConverter(ImageConverter):
    """
    Converter that shells out to a rasterizer and a scaler.
    """

    def __init__(
        self,
        rasterize_command: Optional[List[str]] = None,
        scale_command: Optional[List[str]] = None
    ):
        """
        Initialize the converter.

        Args:
            rasterize_command (List[str], optional): Command template for rasterization
            scale_command (List[str], optional): Command template for scaling

        The executables can be overridden with the INKSCAPE_BIN and
        MAGICK_BIN environment variables.
        """
        self.rasterize_command = self._with_executable(
            list(rasterize_command or DEFAULT_RASTERIZE_COMMAND),
            INKSCAPE_BIN_ENV
        )
        self.scale_command = self._with_executable(
            list(scale_command or DEFAULT_SCALE_COMMAND),
            MAGICK_BIN_ENV
        )

        logger.debug(f"Initialized {self.__class__.__name__} "
                     f"(rasterizer: {self.rasterize_command[0]}, scaler: {self.scale_command[0]})")

    def rasterize(self, source_path: str, target_path: str, width: Optional[int] = None) -> str:
        command = self.build_command(self.rasterize_command, source_path, target_path, width)
        run_tool_command(command, source=source_path)
        return target_path

    def scale(self, source_path: str, target_path: str, width: int) -> str:
        command = self.build_command(self.scale_command, source_path, target_path, width)
        run_tool_command(command, source=source_path)
        return target_path

    def get_service_info(self) -> Dict[str, Any]:
        return {
            "name": "command",
            "rasterizer": self.rasterize_command[0],
            "scaler": self.scale_command[0],
        }

    @staticmethod
    def build_command(
        template: List[str],
        source_path: str,
        target_path: str,
        width: Optional[int]
    ) -> List[str]:
        """
        Fill a command template.

        Args:
            template (List[str]): Arguments with {source}, {target} and {width} placeholders
            source_path (str): Source file path
            target_path (str): Target file path
            width (int, optional): Output width; when None, arguments mentioning {width} are dropped

        Returns:
            List[str]: The command arguments
        """
        command = []
        for arg in template:
            if width is None and WIDTH_PLACEHOLDER in arg:
                continue
            command.append(
                arg.replace("{source}", source_path)
                   .replace("{target}", target_path)
                   .replace(WIDTH_PLACEHOLDER, str(width))
            )
        return command

    @staticmethod
    def _with_executable(template: List[str], env_var: str) -> List[str]:
        executable = os.environ.get(env_var)
        if executable:
            template[0] = executable
        return template
