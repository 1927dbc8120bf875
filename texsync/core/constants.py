"""
Constants for the texsync package.

This module provides constants used throughout the texsync package.
These constants can be easily changed in one place.
"""

# Output size
DEFAULT_TARGET_WIDTH = 64

# Recognised source formats (compared lower-cased)
DEFAULT_VECTOR_EXTENSIONS = [".svg"]
DEFAULT_RASTER_EXTENSIONS = [".png"]
DEFAULT_TARGET_EXTENSION = ".png"

# Two-stage intermediates, relative to the source directory
DEFAULT_INTERMEDIATE_DIR = ".intermediate"

# Converter backends
DEFAULT_BACKEND = "command"
SUPPORTED_BACKENDS = ["command", "python"]

# Command templates for the "command" backend.
# Placeholders: {source}, {target}, {width}. Tokens holding {width} are dropped
# when rasterizing at natural size.
DEFAULT_RASTERIZE_COMMAND = [
    "inkscape",
    "--export-type=png",
    "--export-width={width}",
    "--export-filename={target}",
    "{source}",
]
DEFAULT_SCALE_COMMAND = ["convert", "-scale", "{width}", "{source}", "{target}"]

# Environment variables that override the tool executables
INKSCAPE_BIN_ENV = "INKSCAPE_BIN"
MAGICK_BIN_ENV = "MAGICK_BIN"

# Project-level configuration file looked up in the source directory
PROJECT_CONFIG_FILENAME = "texsync.json"

# Exit status used when a tool executable cannot be found (shell convention)
COMMAND_NOT_FOUND_STATUS = 127
