"""
Notifiers subscribed to courses and admissions.

A notifier turns a record into a message and prints it. It keeps no state
beyond an optional label, so the same notifier can listen to any number of
categories.
"""
from abc import ABC, abstractmethod

from coursecare import config


# 1. The Abstract Interface
class Notifier(ABC):
    def __init__(self, label=None):
        self.label = label

    @abstractmethod
    def format_completed(self, record) -> str:
        pass

    def format_admitted(self, record) -> str:
        return f"{record.patient_name} admitted as {record.patient_type}"

    def on_completed(self, record):
        print(self.format_completed(record))

    def on_admitted(self, record):
        print(self.format_admitted(record))


# 2. Learner-facing notification
class LearnerNotifier(Notifier):
    def format_completed(self, record) -> str:
        lines = [
            "",
            "=== NOTIFICATION SYSTEM ===",
            f"Dear {record.subject_name},",
            f"Your evaluation in {record.category_label} is complete.",
            f"Your Score: {record.computed_value:.2f}%",
        ]
        if record.certified:
            lines.append("✓ CONGRATULATIONS! Certificate has been issued.")
            lines.append("Your certificate is available in your dashboard.")
        else:
            lines.append("✗ FAILED: You did not meet the certification requirements.")
            lines.append("Please retake the course to earn a certificate.")
        lines.append("===========================")
        return "\n".join(lines)


# 3. Hospital department notification
class DepartmentNotifier(Notifier):
    def __init__(self, department):
        super().__init__(department)

    @property
    def department(self):
        return self.label

    def format_completed(self, record) -> str:
        return "\n".join([
            f" [{self.department}] BILLING NOTIFICATION:",
            f"   Patient: {record.subject_name} (ID: {record.subject_id})",
            f"   Billing Type: {record.billing_type}",
            f"   Amount: {config.CURRENCY}{record.computed_value:.2f}",
            f"   Time: {record.timestamp:%H:%M:%S}",
            "   Status: Bill generated successfully",
        ])

    def format_admitted(self, record) -> str:
        return "\n".join([
            f" [{self.department}] NOTIFICATION:",
            f"   New patient admitted: {record.patient_name}",
            f"   Type: {record.patient_type}",
            f"   Time: {record.timestamp:%H:%M:%S}",
            "   Action: Prepare necessary resources",
        ])
