"""
Drop Catalog Tool

Modules:
    models      - Data models (Product, Variant, Catalog, FilterSpec)
    common      - Shared utilities (config loader, logging, CSV utils)
    catalog     - Row normalization, aggregation and facet filtering
    sheets      - Google Sheets row source
"""
