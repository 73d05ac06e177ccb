"""
Configuration Loader

Loads the YAML catalog configuration (sheet location, column headers)
and the Google Sheets API key from the environment.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .constants import API_KEY_ENV_VAR, DEFAULT_COLUMNS

CATALOG_CONFIG = 'catalog.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str = CATALOG_CONFIG) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'catalog.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_sheet_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """
    Load the spreadsheet location.

    Returns:
        Dictionary with spreadsheet_id, sheet_name and range

    Example:
        {
            'spreadsheet_id': '1v0aOYbj...',
            'sheet_name': 'Shopify product import',
            'range': 'A:Z',
        }
    """
    if config is None:
        config = load_config()

    sheet = config.get('sheet', {}) or {}
    return {
        'spreadsheet_id': str(sheet.get('spreadsheet_id', '')),
        'sheet_name': str(sheet.get('sheet_name', '')),
        'range': str(sheet.get('range', 'A:Z')),
    }


def load_column_map(config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """
    Load the logical field -> sheet header mapping.

    Headers from the config override the built-in Shopify import defaults;
    fields the config does not mention keep their default header.
    """
    if config is None:
        config = load_config()

    columns = dict(DEFAULT_COLUMNS)
    overrides = config.get('columns', {}) or {}
    for field_name, header in overrides.items():
        if field_name not in DEFAULT_COLUMNS:
            raise ValueError(f"Unknown column field in config: {field_name}")
        columns[field_name] = str(header)
    return columns


def get_api_key(env_file: Optional[Path] = None) -> Optional[str]:
    """
    Read the Google Sheets API key.

    Loads a .env file first (existing environment variables win).

    Returns:
        The key, or None if it is not configured
    """
    load_dotenv(env_file)
    return os.environ.get(API_KEY_ENV_VAR) or None
