"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAYS_PER_WEEK = 7
DEFAULT_PROJECTION_WEEKS = 12
DEFAULT_NEAR_DAYS = 2
UNKNOWN_SORT_DAYS = 999
DEFAULT_VIEW_CACHE_SIZE = 32

CANCELLED_NOTE = "Buổi học đã bị hủy"
