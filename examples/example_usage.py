"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.hrms_attendance.hrms_attendance.attendance.model import PunchRequest
from src.hrms_attendance.hrms_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    session = container.attendance_service.check_in(1, PunchRequest(latitude=12.9716, longitude=77.5946))
    print(session.to_dict())
    print(container.attendance_service.get_history(1, limit=5).to_dict())


if __name__ == "__main__":
    main()
