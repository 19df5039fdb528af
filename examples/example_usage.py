"""Example: call the service layer directly (no Flask).

Controllers are thin; the report comes straight from ReportService.
"""

import importlib

from attendance_tracker.config import get_settings_module

from attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        jwt_secret=settings.JWT_SECRET,
        token_ttl_hours=settings.JWT_EXPIRES_HOURS,
    )
    for subject in container.subject_service.list_for(1):
        print(subject.subject_name, subject.summary())
    print(container.report_service.build_report(1))


if __name__ == "__main__":
    main()
