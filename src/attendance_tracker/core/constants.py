"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TARGET_PERCENTAGE = 75
DEFAULT_TOKEN_TTL_HOURS = 24
TOKEN_ALGORITHM = "HS256"

# attendance counters are INT UNSIGNED columns
MAX_COUNT = 4294967295
