#!/usr/bin/env python3
"""
Sync datasets from the published site and check their integrity.

Usage:
    python sync_data.py              # Download missing datasets
    python sync_data.py --force      # Re-download everything
    python sync_data.py --validate   # Check data integrity only
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from etl import sync_all, validate_datasets  # noqa: E402
from etl.helpers import load_local_datasets  # noqa: E402
from settings import DATA_DIR, DATASET_FILES  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging()


def run_validation() -> bool:
    """Validate datasets in DATA_DIR."""
    data = load_local_datasets(DATASET_FILES)

    if not data:
        print(f"\n⚠️  No datasets found in {DATA_DIR}. Run 'python sync_data.py' first.\n")
        return True

    result = validate_datasets(data)

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)

    for name, value in result["stats"].items():
        print(f"  {name}: {value}")

    if result["issues"]:
        print(f"\n❌ {len(result['issues'])} errors:")
        for issue in result["issues"]:
            print(f"  • {issue}")

    if result["warnings"]:
        print(f"\n⚠️  {len(result['warnings'])} warnings:")
        for warning in result["warnings"]:
            print(f"  • {warning}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Fix the errors above before publishing.")
    print("=" * 60 + "\n")

    return result["valid"]


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    force = "--force" in args or "-f" in args
    mode = "FORCE (re-download all)" if force else "INCREMENTAL (skip existing)"
    logger.info("Mode: {}", mode)

    written = sync_all(force=force)
    logger.info("Synced {} datasets", len(written))

    logger.info("Running validation...")
    if not run_validation():
        sys.exit(1)


if __name__ == "__main__":
    main()
