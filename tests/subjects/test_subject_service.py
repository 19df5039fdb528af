from __future__ import annotations

import pytest

from attendance_tracker.attendance.service import ReportService
from attendance_tracker.core.enums import SessionType
from attendance_tracker.core.exceptions import NotFoundError, ValidationError
from attendance_tracker.subjects.schemas import CreateSubjectInput
from attendance_tracker.subjects.service import SubjectService


def test_create_seeds_class_and_lab_with_zero_counts(store):
    subject = SubjectService(store).create(1, CreateSubjectInput.from_payload({"subject_name": "  Math "}))

    assert subject.subject_name == "Math"
    assert [a.session_type for a in subject.attendance] == [SessionType.CLASS, SessionType.LAB]
    assert all(a.total_classes == 0 and a.attended_classes == 0 for a in subject.attendance)


@pytest.mark.parametrize("body", [{}, {"subject_name": ""}, {"subject_name": "   "}, {"subject_name": 5}, None])
def test_create_requires_name(body):
    with pytest.raises(ValidationError):
        CreateSubjectInput.from_payload(body)


def test_list_only_returns_own_subjects(store):
    svc = SubjectService(store)
    svc.create(1, CreateSubjectInput("Math"))
    svc.create(2, CreateSubjectInput("Physics"))
    svc.create(1, CreateSubjectInput("Chemistry"))

    assert [s.subject_name for s in svc.list_for(1)] == ["Math", "Chemistry"]
    assert [s.subject_name for s in svc.list_for(2)] == ["Physics"]


def test_report_isolated_per_user(store):
    svc = SubjectService(store)
    mine = svc.create(1, CreateSubjectInput("Math"))
    theirs = svc.create(2, CreateSubjectInput("Physics"))
    store.upsert_for_owner(user_id=1, subject_id=mine.subject_id, session_type=SessionType.CLASS, total_classes=10, attended_classes=9)
    store.upsert_for_owner(user_id=2, subject_id=theirs.subject_id, session_type=SessionType.CLASS, total_classes=50, attended_classes=1)

    report = ReportService(store).build_report(1)
    assert (report.total, report.attended) == (10, 9)


def test_delete_removes_children(store):
    svc = SubjectService(store)
    subject = svc.create(1, CreateSubjectInput("Math"))

    svc.delete(1, subject.subject_id)

    assert svc.list_for(1) == []
    assert store.attendance == {}


def test_delete_succeeds_without_children(store):
    svc = SubjectService(store)
    subject = svc.create(1, CreateSubjectInput("Math"))
    store.attendance.clear()

    svc.delete(1, subject.subject_id)
    assert svc.list_for(1) == []


def test_delete_of_foreign_subject_is_not_found(store):
    svc = SubjectService(store)
    subject = svc.create(1, CreateSubjectInput("Math"))

    with pytest.raises(NotFoundError):
        svc.delete(2, subject.subject_id)
    assert len(svc.list_for(1)) == 1


def test_subject_summary(store):
    subject = SubjectService(store).create(1, CreateSubjectInput("Math"))
    store.upsert_for_owner(user_id=1, subject_id=subject.subject_id, session_type=SessionType.LAB, total_classes=4, attended_classes=2)

    listed = SubjectService(store).list_for(1)[0].to_dict(with_summary=True)
    assert listed["summary"] == {"total": 4, "attended": 2, "percentage": 50.0, "needed": 4}
