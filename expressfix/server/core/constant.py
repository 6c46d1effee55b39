"""Application-wide constants for the ExpressFix server."""

PROJECT_NAME = "ExpressFix"
API_V1_STR = "/api/v1"
API_VERSION = "1.0.0"
SCHEMA_VERSION = "v1"

# Daily targets shown on the analytics dashboard
DAILY_UPLOADS_GOAL = 10
DAILY_ANALYSIS_GOAL = 20

RECENT_ACTIVITY_LIMIT = 5
