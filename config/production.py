import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

NEAR_DAYS = int(os.getenv("NEAR_DAYS", "2"))
DEFAULT_PROJECTION_WEEKS = int(os.getenv("DEFAULT_PROJECTION_WEEKS", "12"))
VIEW_CACHE_SIZE = int(os.getenv("VIEW_CACHE_SIZE", "128"))
