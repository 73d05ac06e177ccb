# Common utilities
from .config_loader import (
    get_api_key,
    load_column_map,
    load_config,
    load_sheet_settings,
)
from .csv_utils import configure_csv, load_rows_from_csv, read_csv, write_csv
from .log_config import setup_logging
from .text_utils import cell_text, html_to_text, short_id, split_tags
