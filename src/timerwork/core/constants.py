"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_GOAL_MINUTES = 2400  # 40 hours
DEFAULT_HISTORY_LIMIT = 50
DEFAULT_TOKEN_TTL_HOURS = 24
TOKEN_ALGORITHM = "HS256"
MAX_GOAL_MINUTES = 2_147_483_647  # MySQL INT upper bound
