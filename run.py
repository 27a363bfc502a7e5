#!/usr/bin/env python3
"""Start the Streamlit dashboard. Extra arguments go to `streamlit run`."""

import subprocess
import sys
from pathlib import Path

DASHBOARD = Path(__file__).parent / "web" / "streamlit" / "app.py"

if __name__ == "__main__":
    sys.exit(subprocess.call([sys.executable, "-m", "streamlit", "run", str(DASHBOARD), *sys.argv[1:]]))
