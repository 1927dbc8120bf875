"""
Converter that runs entirely inside the Python process.

Vectors are rendered with CairoSVG (install the ``cairo`` extra) and rasters
are rescaled with Pillow, so no external executables are needed.
"""

from typing import Dict, Any, Optional

from PIL import Image

from texsync.converters.base import ImageConverter
from texsync.core.error_handler import ConversionError, ConfigurationError
from texsync.core.logging_config import get_logger

logger = get_logger(__name__)

class InProcessConverter(ImageConverter):
    """
    Converter using CairoSVG for rasterization and Pillow for scaling.
    """

    def __init__(self, resample: int = Image.LANCZOS):
        """
        Initialize the converter.

        Args:
            resample (int): Pillow resampling filter used when scaling
        """
        self.resample = resample
        logger.debug(f"Initialized {self.__class__.__name__}")

    def rasterize(self, source_path: str, target_path: str, width: Optional[int] = None) -> str:
        logger.info(f"cairosvg {source_path} -> {target_path} (width: {width or 'natural'})")

        # Imported here so the scaler works without the cairo system library
        try:
            import cairosvg
        except (ImportError, OSError) as e:
            raise ConfigurationError(
                message=f"The python backend needs CairoSVG and the cairo library "
                        f"(pip install 'texsync[cairo]'): {e}",
                component="converter",
                invalid_keys=["converter.backend"]
            )

        options = {"url": source_path, "write_to": target_path}
        if width is not None:
            options["output_width"] = width

        try:
            cairosvg.svg2png(**options)
        except Exception as e:
            raise ConversionError(
                message=f"Rasterization failed: {e}",
                returncode=1,
                source=source_path
            )

        return target_path

    def scale(self, source_path: str, target_path: str, width: int) -> str:
        logger.info(f"pillow scale {width} {source_path} -> {target_path}")

        try:
            with Image.open(source_path) as img:
                height = max(1, round(img.height * width / img.width))
                resized = img.resize((width, height), resample=self.resample)
                resized.save(target_path)
        except (OSError, ValueError) as e:
            raise ConversionError(
                message=f"Scaling failed: {e}",
                returncode=1,
                source=source_path
            )

        return target_path

    def get_service_info(self) -> Dict[str, Any]:
        return {
            "name": "python",
            "rasterizer": "cairosvg",
            "scaler": "pillow",
        }
