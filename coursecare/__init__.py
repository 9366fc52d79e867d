"""
coursecare — pluggable strategies with completion notifications, shown
through a course evaluation demo and a hospital billing demo.
"""
from coursecare.categories import Admission, Category, Course, CourseType, PatientType
from coursecare.entities import Entity, Learner, Patient
from coursecare.errors import CourseCareError, ValidationError
from coursecare.notifications import DepartmentNotifier, LearnerNotifier, Notifier
from coursecare.records import AdmissionRecord, CompletionRecord
from coursecare.strategies import StrategyFactory

__version__ = "1.0.0"

__all__ = [
    "Admission", "AdmissionRecord", "Category", "CompletionRecord", "Course",
    "CourseCareError", "CourseType", "DepartmentNotifier", "Entity", "Learner",
    "LearnerNotifier", "Notifier", "Patient", "PatientType", "StrategyFactory",
    "ValidationError",
]
