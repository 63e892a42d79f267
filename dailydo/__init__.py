"""dailydo - personal task tracking with streaks and achievements

Components:
    parser/: Turn "Submit report at 3pm" into a task text and a due time
    achievements/: Streak bookkeeping and the achievement catalog
    tasks/: sqlite-backed task store and the hourly reminder sweep

Usage:
    from dailydo.parser import extract
    from dailydo.achievements import apply_completion

    parsed = extract("Buy groceries tomorrow at 7pm")
    print(parsed.text, parsed.due_time)
"""

import os
from pathlib import Path

__version__ = "0.1.0"

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
DB_PATH = Path(os.environ.get("DAILYDO_DB_PATH", PROJECT_ROOT / "data" / "dailydo.db"))
CONFIG_PATH = Path(os.environ.get("DAILYDO_CONFIG", PROJECT_ROOT / "args" / "dailydo.yaml"))

__all__ = [
    "__version__",
    "PROJECT_ROOT",
    "DB_PATH",
    "CONFIG_PATH",
]
