"""Constants and defaults.

Note: Keep business constants here to avoid magic numbers spread across code.
Settings modules may override the policy values.
"""

from datetime import time

EARTH_RADIUS_KM = 6371.0

DEFAULT_GEOFENCE_RADIUS_METERS = 300.0
DEFAULT_WORK_START = time(9, 30)
DEFAULT_WORK_END = time(18, 30)
DEFAULT_LOW_WORK_HOURS = 5.0

DEFAULT_HISTORY_PAGE = 1
DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 100
DEFAULT_REPORT_DAYS = 7

LEGACY_OFFICE_NAME = "Assigned Office"
