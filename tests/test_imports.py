"""
Test script to verify that the package imports work correctly.
"""

import pytest

def test_imports():
    """Test that all package imports work correctly."""
    # Test imports from the main package
    from texsync import (
        AssetConverter,
        SourceAsset,
        SyncReport,
        ImageConverter,
        CommandLineConverter,
        InProcessConverter,
        ConversionError,
        ConfigurationError
    )

    # Test imports from core
    from texsync.core import (
        get_config,
        get_config_value,
        set_config_value,
        get_logger,
        configure_logging,
        is_stale,
        list_source_files,
        ConversionError,
        ConfigurationError
    )

    # Test imports from converters
    from texsync.converters import (
        ImageConverter,
        CommandLineConverter,
        InProcessConverter,
        create_converter
    )

    # Test imports from sync
    from texsync.sync import AssetConverter, SourceAsset, SyncReport

    # Test the schema ships with the package
    from texsync.schemas import load_schema
    assert load_schema("sync_config")["type"] == "object"
