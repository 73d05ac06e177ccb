"""
Google Sheets API Client

Fetches the product import sheet through the Sheets v4 values API
(API-key auth) and turns it into header-keyed rows.
Handles rate limiting, retries and error handling.
"""

import logging
import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

SheetValues = List[List[Any]]


class SourceUnavailableError(Exception):
    """The sheet could not be retrieved; no catalog can be built this refresh."""


def rows_to_records(values: SheetValues) -> List[Dict[str, Any]]:
    """
    Convert a value grid into rows keyed by header.

    The first row holds the headers. Cells missing from the end of a short
    row, and empty cells, become None.

    Args:
        values: Grid as returned by the values API

    Returns:
        One dict per data row, in sheet order
    """
    if not values:
        return []

    headers = [str(header) for header in values[0]]
    records = []
    for row in values[1:]:
        record = {}
        for index, header in enumerate(headers):
            value = row[index] if index < len(row) else None
            record[header] = value if value not in ('', None) else None
        records.append(record)
    return records


class SheetsClient:
    """
    Client for the Google Sheets values API.

    Handles:
    - API key authentication
    - Rate limiting (2 requests/second)
    - Retries on rate limiting and server errors

    Usage:
        with SheetsClient(api_key, spreadsheet_id, "Shopify product import") as client:
            rows = client.fetch_rows()
    """

    BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
    MAX_RETRIES = 5
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        api_key: Optional[str],
        spreadsheet_id: str,
        sheet_name: str,
        cell_range: str = "A:Z",
    ):
        """
        Initialize the API client.

        Args:
            api_key: Google API key with Sheets API access
            spreadsheet_id: ID from the spreadsheet URL
            sheet_name: Tab name (e.g., "Shopify product import")
            cell_range: A1 range within the tab (default: all columns A-Z)
        """
        self.api_key = api_key
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.cell_range = cell_range

        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        # Rate limiting
        self.requests_made = 0
        self.last_request_time = 0.0
        self.min_request_interval = 0.5  # 2 req/sec

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    @property
    def a1_range(self) -> str:
        return f"{self.sheet_name}!{self.cell_range}" if self.sheet_name else self.cell_range

    @property
    def values_url(self) -> str:
        return f"{self.BASE_URL}/{self.spreadsheet_id}/values/{quote(self.a1_range, safe='!:')}"

    def _rate_limit(self):
        """Implement rate limiting (2 requests/second max)."""
        now = time.time()
        elapsed = now - self.last_request_time

        if elapsed < self.min_request_interval:
            time.sleep(self.min_request_interval - elapsed)

        self.last_request_time = time.time()
        self.requests_made += 1

    @staticmethod
    def _retry_delay(response, attempt: int) -> int:
        """Seconds from Retry-After, or exponential backoff when absent or an HTTP-date."""
        retry_after = response.headers.get("Retry-After")
        try:
            return int(retry_after)
        except (TypeError, ValueError):
            return 2 ** attempt

    def get_values(self, timeout: int = 30) -> Optional[SheetValues]:
        """
        Fetch the raw value grid.

        Args:
            timeout: Request timeout in seconds

        Returns:
            List of rows (header row first), [] for an empty range, or None on error
        """
        params = {"key": self.api_key}

        for attempt in range(self.MAX_RETRIES):
            self._rate_limit()

            try:
                response = self.session.get(self.values_url, params=params, timeout=timeout)

                # Retry on rate limiting or server errors
                if response.status_code in self.RETRYABLE_STATUS_CODES:
                    retry_after = self._retry_delay(response, attempt)
                    logger.warning("HTTP %d on %s, retry %d/%d in %ds...",
                                   response.status_code, self.a1_range, attempt + 1,
                                   self.MAX_RETRIES, retry_after)
                    time.sleep(retry_after)
                    continue

                if response.status_code >= 400:
                    logger.error("API Error %d: %s", response.status_code, response.text[:200])
                    return None

                return response.json().get("values", [])

            except requests.exceptions.Timeout:
                logger.error("Request timeout: %s", self.a1_range)
                return None
            except requests.exceptions.RequestException as e:
                logger.error("Request failed: %s", e)
                return None
            except ValueError as e:
                logger.error("Invalid JSON from Sheets API: %s", e)
                return None

        logger.error("Max retries (%d) exceeded for %s", self.MAX_RETRIES, self.a1_range)
        return None

    def fetch_rows(self) -> List[Dict[str, Any]]:
        """
        Fetch the sheet as header-keyed rows.

        Returns:
            Rows in sheet order ([] for a sheet with headers only)

        Raises:
            SourceUnavailableError: No API key, request failure, or no data at all
        """
        if not self.api_key:
            raise SourceUnavailableError("Google Sheets API key is not configured")

        values = self.get_values()
        if values is None:
            raise SourceUnavailableError(f"Could not fetch {self.a1_range}")
        if not values:
            raise SourceUnavailableError(f"No data found in spreadsheet range {self.a1_range}")

        records = rows_to_records(values)
        logger.info("Fetched %d rows from %s", len(records), self.a1_range)
        return records
