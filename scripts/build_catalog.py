#!/usr/bin/env python3
"""
Build the drop catalog from the product import sheet.

Fetches the sheet (or reads a local CSV export), groups rows into products,
prints the drop summary and the facet counts for the given selection.

Usage:
    python3 scripts/build_catalog.py                        # Google Sheet from config/catalog.yaml
    python3 scripts/build_catalog.py --csv data/products.csv
    python3 scripts/build_catalog.py --drop 2 --color Black
    python3 scripts/build_catalog.py --drop unsorted --list
    python3 scripts/build_catalog.py --json output/catalog.json --export-csv output/products.csv

Environment:
    GOOGLE_SHEETS_API_KEY   API key for the Sheets values API (.env is loaded)

Exit codes:
    0 = catalog built
    1 = source unavailable
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dropcatalog.catalog import build_catalog, filter_products
from dropcatalog.common.config_loader import (
    get_api_key,
    load_column_map,
    load_config,
    load_sheet_settings,
)
from dropcatalog.common.csv_utils import load_rows_from_csv, write_csv
from dropcatalog.common.log_config import setup_logging
from dropcatalog.common.text_utils import html_to_text, short_id, split_tags
from dropcatalog.models import FilterSpec
from dropcatalog.sheets import SheetsClient, SourceUnavailableError

logger = logging.getLogger("dropcatalog.scripts.build_catalog")

EXPORT_FIELDNAMES = ["Handle", "ID", "Title", "Type", "Drop", "Tags", "Images", "Variants", "Colors", "Description"]


def load_catalog_config(use_sheet: bool) -> dict:
    """
    Load config/catalog.yaml.

    A CSV export only needs column headers, so a missing config falls back
    to the default Shopify import headers. The sheet source needs the
    spreadsheet location and cannot run without it.
    """
    try:
        return load_config()
    except FileNotFoundError as e:
        if use_sheet:
            raise SourceUnavailableError(f"Sheet settings unavailable: {e}") from e
        logger.warning("%s; using default column headers", e)
        return {}


def load_rows(args, config: dict) -> list[dict]:
    """Load raw rows from the CSV export or the configured sheet."""
    if args.csv:
        if not os.path.exists(args.csv):
            raise SourceUnavailableError(f"CSV file not found: {args.csv}")
        logger.info("Reading rows from %s", args.csv)
        return load_rows_from_csv(args.csv)

    settings = load_sheet_settings(config)
    with SheetsClient(
        api_key=get_api_key(),
        spreadsheet_id=settings["spreadsheet_id"],
        sheet_name=settings["sheet_name"],
        cell_range=settings["range"],
    ) as client:
        return client.fetch_rows()


def export_rows(catalog) -> list[dict]:
    """One summary row per product."""
    rows = []
    for product in catalog.products:
        colors = []
        for variant in product.variants:
            if variant.option2 and variant.option2 not in colors:
                colors.append(variant.option2)
        rows.append({
            "Handle": product.handle,
            "ID": short_id(product.handle),
            "Title": product.title,
            "Type": product.product_type,
            "Drop": "" if product.drop is None else product.drop,
            "Tags": ", ".join(split_tags(product.tags)),
            "Images": len(product.images),
            "Variants": len(product.variants),
            "Colors": ", ".join(colors),
            "Description": html_to_text(product.body_html),
        })
    return rows


def print_report(catalog, result, spec: FilterSpec, show_list: bool) -> None:
    print(f"\n{'=' * 60}")
    print(f"Products: {len(catalog.products)}  (skipped rows: {catalog.skipped_rows})")
    print(f"{'=' * 60}")

    print("\nDrops:")
    for group in catalog.drops:
        print(f"  Drop {group.drop:<10} {group.count:>5}")
    print(f"  {'Unsorted':<15} {catalog.unsorted_count:>5}")

    selection = ", ".join(
        f"{name}={value}" for name, value in asdict(spec).items() if value
    ) or "none"
    print(f"\nSelection: {selection}  ->  {len(result.products)} products")

    for title, counts in (
        ("Drop", result.drop_counts),
        ("Type", result.category_counts),
        ("Color", result.color_counts),
    ):
        print(f"\n{title}:")
        for value, count in counts.items():
            print(f"  {value:<30} {count:>5}")

    if show_list:
        print("\nProducts:")
        for product in result.products:
            print(f"  [{short_id(product.handle)}] {product.title}  "
                  f"({len(product.variants)} variants, {len(product.images)} images)")


def main():
    parser = argparse.ArgumentParser(
        description="Build the drop catalog and facet counts from the product import sheet"
    )
    parser.add_argument("--csv", help="Read rows from a local CSV export instead of the sheet")
    parser.add_argument("--drop", help='Drop number, or "unsorted"')
    parser.add_argument("--category", help="Product type")
    parser.add_argument("--color", help="Variant color (Option2 Value)")
    parser.add_argument("--list", action="store_true", help="List the selected products")
    parser.add_argument("--json", help="Write catalog and facet result as JSON")
    parser.add_argument("--export-csv", help="Write one summary row per product")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Warnings only")
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_catalog_config(use_sheet=not args.csv)
        raw_rows = load_rows(args, config)
    except SourceUnavailableError as e:
        logger.error("Source unavailable: %s", e)
        sys.exit(1)

    catalog = build_catalog(raw_rows, columns=load_column_map(config))
    spec = FilterSpec(drop=args.drop, category=args.category, color=args.color)
    result = filter_products(catalog.products, spec)

    print_report(catalog, result, spec, args.list)

    if args.json:
        with open(args.json, "w", encoding="utf-8") as f:
            json.dump({"catalog": asdict(catalog), "selection": asdict(result)},
                      f, ensure_ascii=False, indent=2)
        logger.info("Wrote %s", args.json)

    if args.export_csv:
        count = write_csv(args.export_csv, export_rows(catalog), fieldnames=EXPORT_FIELDNAMES)
        logger.info("Wrote %d products to %s", count, args.export_csv)


if __name__ == "__main__":
    main()
