"""Environment-variable-based configuration for the workout hosts."""

from __future__ import annotations

import os
from pathlib import Path

STORE_PATH: Path = Path(
    os.environ.get("REDCARDUH_STORE_PATH", "~/.redcarduh/store.json")
).expanduser()
LOG_LEVEL: str = os.environ.get("REDCARDUH_LOG_LEVEL", "INFO").upper()
TICK_SECONDS: float = float(os.environ.get("REDCARDUH_TICK_SECONDS", "1"))
