"""
CSV Utilities

Reading and writing CSV files with proper configuration.
Used to load a local Shopify product import export as an alternative row source.
"""

import csv
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional


def configure_csv(field_size_limit: int = 10 * 1024 * 1024) -> None:
    """
    Configure CSV module for large fields (Body (HTML) can be long).

    Args:
        field_size_limit: Maximum field size in bytes (default: 10MB)
    """
    csv.field_size_limit(field_size_limit)


def read_csv(file_path: str | Path, encoding: str = 'utf-8') -> Iterator[Dict[str, str]]:
    """
    Read CSV file and yield rows as dictionaries.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8)

    Yields:
        Dictionary for each row with column names as keys
    """
    configure_csv()

    with open(file_path, 'r', encoding=encoding, newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            yield row


def load_rows_from_csv(file_path: str | Path, encoding: str = 'utf-8-sig') -> List[Dict[str, Any]]:
    """
    Load sheet rows from a CSV export.

    Empty cells become None, matching what the Sheets source returns.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8-sig, tolerates a BOM)

    Returns:
        List of raw rows in file order
    """
    rows = []
    for row in read_csv(file_path, encoding=encoding):
        rows.append({
            header: (value if value != '' else None)
            for header, value in row.items()
            if header is not None
        })
    return rows


def write_csv(
    file_path: str | Path,
    rows: List[Dict[str, str]],
    fieldnames: Optional[List[str]] = None,
    encoding: str = 'utf-8'
) -> int:
    """
    Write rows to CSV file.

    Args:
        file_path: Path to output CSV file
        rows: List of dictionaries to write
        fieldnames: Column names (if None, uses keys from first row)
        encoding: File encoding (default: utf-8)

    Returns:
        Number of rows written
    """
    if not rows:
        return 0

    if fieldnames is None:
        fieldnames = list(rows[0].keys())

    with open(file_path, 'w', encoding=encoding, newline='') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    return len(rows)
