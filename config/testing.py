import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_attendance_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

GEOFENCE_RADIUS_METERS = 300
WORK_START = "09:30"
WORK_END = "18:30"
LOW_WORK_HOURS = 5

AUTO_INIT_DB = False
