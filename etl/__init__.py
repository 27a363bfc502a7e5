"""ETL package - dataset sync from the published site into DATA_DIR."""

from etl.sync import sync_all
from etl.validation import validate_datasets

__all__ = [
    "sync_all",
    "validate_datasets",
]
