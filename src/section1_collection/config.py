"""
Configuration for Section 1: Report Collection

Handles the inxi binary location, default mode, command timeout,
and output locations.
"""

import os
import shutil
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class CollectorConfig:
    """Configuration for the Collector."""

    # inxi settings
    INXI_BINARY: str = os.getenv("INXI_BINARY", "inxi")
    DEFAULT_MODE: str = os.getenv("INXI_DASHBOARD_MODE", "basic")
    COMMAND_TIMEOUT_SECONDS: int = int(os.getenv("INXI_TIMEOUT_SECONDS", "30"))

    # Saved reports and dashboards
    OUTPUT_DIR: Path = Path(os.getenv("INXI_OUTPUT_DIR", "data/processed"))
    DOWNLOAD_FILENAME_PREFIX: str = "inxi-dashboard"

    @classmethod
    def ensure_output_dir(cls) -> Path:
        """Create output directory if it doesn't exist."""
        cls.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        return cls.OUTPUT_DIR

    @classmethod
    def validate(cls) -> bool:
        """Check that the inxi binary can be found on PATH."""
        if shutil.which(cls.INXI_BINARY) is None:
            print(f"⚠️ Warning: required binary '{cls.INXI_BINARY}' missing from PATH.")
            print("   Install inxi or set INXI_BINARY to its location.")
            return False
        return True
