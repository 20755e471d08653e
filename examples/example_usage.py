"""Example: drive the attendance sheet through the session layer (no Flask).

Goal: show that controllers are a thin layer; the rules live in the session and classifier.
"""

import importlib

from config import get_settings_module

from src.hr_admin.hr_admin.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(mongo_config=settings.MONGO_CONFIG)
    session = container.attendance_session()
    print(f"{session.date_key}: {len(session.records)} marked, {len(session.eligible_employees())} left to mark")
    for record in session.filter(status="Half Present"):
        print(record.name, record.time_in)


if __name__ == "__main__":
    main()
