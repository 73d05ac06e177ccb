"""
Google Sheets integration.

Modules:
    api_client - Values API client and header-keyed row conversion
"""

from .api_client import SheetsClient, SourceUnavailableError, rows_to_records

__all__ = [
    'SheetsClient',
    'SourceUnavailableError',
    'rows_to_records',
]
