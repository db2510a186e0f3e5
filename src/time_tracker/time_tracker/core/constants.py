"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_HOURS = 24
JWT_ALGORITHM = "HS256"

USERS_COLLECTION = "users"
ENTRIES_COLLECTION = "timeentries"

SECONDS_PER_HOUR = 3600
HOURS_PRECISION = 2
