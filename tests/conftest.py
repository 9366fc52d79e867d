"""
Pytest Configuration and Fixtures

Shared fixtures for the course evaluation and hospital billing tests.
"""
import pytest

from coursecare.categories import Admission, Course, CourseType, PatientType
from coursecare.entities import Learner, Patient
from coursecare.notifications import Notifier


class CountingNotifier(Notifier):
    """Records every delivery instead of printing it."""

    def __init__(self, label=None):
        super().__init__(label)
        self.completed = []
        self.admitted = []

    def format_completed(self, record) -> str:
        return record.subject_name

    def on_completed(self, record):
        self.completed.append(record)

    def on_admitted(self, record):
        self.admitted.append(record)


@pytest.fixture
def alice() -> Learner:
    return Learner(101, "Alice Johnson", 75)


@pytest.fixture
def free_course(alice) -> Course:
    return Course(CourseType.FREE, "Introduction to Python", "PY101", alice)


@pytest.fixture
def paid_course() -> Course:
    learner = Learner(102, "Bob Smith", 85)
    return Course(CourseType.PAID, "Advanced Data Structures", "CS201", learner, fee=199.99)


@pytest.fixture
def patient() -> Patient:
    return Patient(201, "Ravi Kumar", 45, "Fractured arm")


@pytest.fixture
def admission(patient) -> Admission:
    return Admission(PatientType.GENERAL, patient, 1000.0)


@pytest.fixture
def make_notifier():
    return CountingNotifier
