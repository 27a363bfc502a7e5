"""ETL helper functions."""

import json
from pathlib import Path

from loguru import logger

from settings import DATA_DIR


def dataset_path(filename: str, data_dir: Path = DATA_DIR) -> Path:
    return Path(data_dir) / filename


def get_existing_files(filenames: list[str], data_dir: Path = DATA_DIR) -> set[str]:
    """Dataset files already present on disk."""
    return {f for f in filenames if dataset_path(f, data_dir).exists()}


def read_dataset(filename: str, data_dir: Path = DATA_DIR) -> list:
    """Read a dataset file as raw JSON."""
    return json.loads(dataset_path(filename, data_dir).read_text(encoding="utf-8"))


def write_dataset(filename: str, records: list, data_dir: Path = DATA_DIR) -> None:
    """Write raw JSON records, keeping Czech diacritics readable."""
    path = dataset_path(filename, data_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.debug("Wrote {} records to {}", len(records), path)


def load_local_datasets(filenames: list[str], data_dir: Path = DATA_DIR) -> dict[str, list]:
    """Read every dataset present on disk, keyed by file name."""
    return {f: read_dataset(f, data_dir) for f in get_existing_files(filenames, data_dir)}
