"""Main sync orchestration - download datasets into DATA_DIR."""

import asyncio
from pathlib import Path

from loguru import logger

from etl.helpers import get_existing_files, write_dataset
from etl.validation import parse_records
from kalkulacka_client import safe_request
from kalkulacka_client.polls import PollClient
from kalkulacka_client.reference import ReferenceClient
from settings import (
    DATA_DIR,
    DATASET_FILES,
    ISSUES_FILE,
    MAX_CONCURRENT,
    PARTIES_FILE,
    POLLS_FILE,
    POSITIONS_FILE,
    THESES_FILE,
)


async def _fetch_all(filenames: list[str]) -> dict[str, list]:
    """Fetch the requested datasets concurrently."""
    async with ReferenceClient(MAX_CONCURRENT) as ref, PollClient(MAX_CONCURRENT) as polls:
        fetchers = {
            PARTIES_FILE: ref.parties,
            ISSUES_FILE: ref.issues,
            THESES_FILE: ref.theses,
            POSITIONS_FILE: ref.positions,
            POLLS_FILE: polls.polls,
        }
        results = await asyncio.gather(*(safe_request(fetchers[f](), []) for f in filenames))
    return dict(zip(filenames, results))


async def _sync_async(force: bool, data_dir: Path) -> dict[str, int]:
    """Async sync implementation. Returns record counts of written files."""
    existing = set() if force else get_existing_files(DATASET_FILES, data_dir)
    to_sync = [f for f in DATASET_FILES if f not in existing]

    if not to_sync:
        logger.info("All datasets present, nothing to sync")
        return {}

    logger.info("Syncing {}{}", ", ".join(to_sync), " [FORCE]" if force else "")
    fetched = await _fetch_all(to_sync)

    written = {}
    for filename, records in fetched.items():
        if not records:
            logger.error("No data for {}, skipping", filename)
            continue

        _, errors = parse_records(filename, records)
        if errors:
            logger.error("{}: {} schema errors, not written (first: {})", filename, len(errors), errors[0])
            continue

        write_dataset(filename, records, data_dir)
        written[filename] = len(records)
        logger.info("{}: {} records", filename, len(records))

    return written


def sync_all(force: bool = False, data_dir: Path = DATA_DIR) -> dict[str, int]:
    """Main sync entry point."""
    return asyncio.run(_sync_async(force, Path(data_dir)))
