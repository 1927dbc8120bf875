"""
Asset synchronisation components.

This module provides the asset converter and the report it records runs into.
"""

from texsync.sync.asset_converter import AssetConverter, SourceAsset
from texsync.sync.sync_report import SyncReport
