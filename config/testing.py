SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

NEAR_DAYS = 2
DEFAULT_PROJECTION_WEEKS = 12
VIEW_CACHE_SIZE = 0
