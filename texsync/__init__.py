"""
texsync - Raster asset synchronisation for vector textures and icons

A Python package that keeps generated raster images (PNG) in sync with their
authored sources. Vector sources are rasterized, rasters are scaled to a fixed
width, and targets that are already newer than their sources are skipped.
"""

__version__ = "0.1.0"

# Import main components for easier access
from texsync.sync.asset_converter import AssetConverter, SourceAsset
from texsync.sync.sync_report import SyncReport
from texsync.converters.base import ImageConverter
from texsync.converters.command_line import CommandLineConverter
from texsync.converters.in_process import InProcessConverter
from texsync.core.error_handler import ConversionError, ConfigurationError
