"""
JSON schemas for validating configuration data.

This package contains JSON schema definitions for:
- The merged texsync configuration (sync_config)
"""

import os
import json
from typing import Dict, Any

def get_schema_path(schema_name: str) -> str:
    """
    Get the absolute path to a packaged schema file.

    Args:
        schema_name (str): Name of the schema file without extension

    Returns:
        str: Absolute path to the schema file
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), f"{schema_name}.json")

def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Load a packaged JSON schema.

    Args:
        schema_name (str): Name of the schema file without extension

    Returns:
        Dict[str, Any]: The schema

    Raises:
        FileNotFoundError: If no schema with that name ships with the package
    """
    with open(get_schema_path(schema_name), "r") as f:
        return json.load(f)
