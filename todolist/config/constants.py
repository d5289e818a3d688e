"""
Application constants
"""

# Storage
DEFAULT_TASKS_FILE = "tareas.json"
JSON_INDENT = 2

# Task defaults
TASK_DEFAULT_PRIORITY = 3  # 1..5, 5 is the highest
HIGH_PRIORITY_THRESHOLD = 4

# Difficulty ordering used by sort_by_difficulty
DIFFICULTY_RANK = {
    "low": 1,
    "medium": 2,
    "high": 3,
}
DEFAULT_DIFFICULTY_RANK = 2  # unknown values rank as medium

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
