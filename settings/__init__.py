"""Application settings."""

import os
from pathlib import Path

# Data
DATA_DIR = Path(os.getenv("KALKULACKA_DATA_DIR", "data"))
DATA_BASE_URL = os.getenv("KALKULACKA_DATA_URL", "https://volebni-kalkulacka.cz/data")

PARTIES_FILE = "parties.json"
ISSUES_FILE = "issues.json"
THESES_FILE = "theses.json"
POSITIONS_FILE = "party_positions.json"
POLLS_FILE = "complete-polls.json"

DATASET_FILES = [PARTIES_FILE, ISSUES_FILE, THESES_FILE, POSITIONS_FILE, POLLS_FILE]

# Logging
LOG_DIR = Path(os.getenv("KALKULACKA_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("KALKULACKA_LOG_LEVEL", "INFO")
LOG_RETENTION = "7 days"

# API
API_TIMEOUT = 30

# Sync
MAX_CONCURRENT = 5
