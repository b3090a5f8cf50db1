import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Attendance engine tuning
NEAR_DAYS = int(os.getenv("NEAR_DAYS", "2"))
DEFAULT_PROJECTION_WEEKS = int(os.getenv("DEFAULT_PROJECTION_WEEKS", "12"))
# 0 disables the attendance view memo
VIEW_CACHE_SIZE = int(os.getenv("VIEW_CACHE_SIZE", "32"))
