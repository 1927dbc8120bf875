"""
Base converter interface.

This module defines the interface the asset converter uses to turn vector
sources into rasters and to rescale rasters. Implementations wrap external
command-line tools or in-process libraries.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

class ImageConverter(ABC):
    """
    Base interface for rasterization and scaling services.
    """

    @abstractmethod
    def rasterize(
        self,
        source_path: str,
        target_path: str,
        width: Optional[int] = None
    ) -> str:
        """
        Render a vector image into a raster image.

        Args:
            source_path (str): Path to the vector source
            target_path (str): Path of the raster to write (overwritten)
            width (int, optional): Output width in pixels; None keeps the natural size

        Returns:
            str: Path to the written raster

        Raises:
            ConversionError: If rasterization fails
        """
        pass

    @abstractmethod
    def scale(
        self,
        source_path: str,
        target_path: str,
        width: int
    ) -> str:
        """
        Resize a raster image to a given width, keeping its aspect ratio.

        Args:
            source_path (str): Path to the raster source
            target_path (str): Path of the raster to write (overwritten)
            width (int): Output width in pixels

        Returns:
            str: Path to the written raster

        Raises:
            ConversionError: If scaling fails
        """
        pass

    @abstractmethod
    def get_service_info(self) -> Dict[str, Any]:
        """
        Get information about the conversion service.

        Returns:
            Dict[str, Any]: Service information including name and tools used
        """
        pass
