"""
Unit Tests for record tables
"""
import pytest

from coursecare.categories import Admission, PatientType
from coursecare.entities import Patient
from coursecare.reporting import (
    RECORD_COLUMNS, RecordCollector, bill_summary, certification_rate, records_to_frame, revenue_by_type,
)
from coursecare.strategies import emergency_billing, insurance_billing, quiz_based


@pytest.fixture
def collector() -> RecordCollector:
    return RecordCollector("Test")


class TestRecordCollector:
    """Tests for the collecting notifier."""

    def test_collects_bills_and_admissions(self, admission, collector):
        admission.subscribe(collector)
        admission.subscribe_admission(collector)
        admission.admit()
        admission.attach_strategy(insurance_billing)
        admission.compute()

        assert len(collector.admissions) == 1
        assert len(collector.records) == 1


class TestFrames:
    """Tests for the pandas views."""

    def test_empty_frame(self):
        df = records_to_frame([])
        assert list(df.columns) == RECORD_COLUMNS
        assert bill_summary(df)["patients"] == 0
        assert revenue_by_type(df).empty
        assert certification_rate(df) == 0.0

    def test_bill_summary(self, collector):
        general = Admission(PatientType.GENERAL, Patient(1, "Ann", 30, "Flu"), 1000)
        icu = Admission(PatientType.ICU, Patient(2, "Ben", 70, "Stroke"), 2000)
        for admission, strategy in ((general, insurance_billing), (icu, emergency_billing)):
            admission.subscribe(collector)
            admission.attach_strategy(strategy)
            admission.compute()

        df = records_to_frame(collector.records)
        summary = bill_summary(df)
        assert summary["patients"] == 2
        assert summary["total_base"] == pytest.approx(3000)
        assert summary["total_billed"] == pytest.approx(3600)
        assert summary["net_delta"] == pytest.approx(600)

        revenue = revenue_by_type(df).set_index("category_label")["computed_value"]
        assert revenue["ICU - Intensive Care"] == pytest.approx(3000)

    def test_certification_rate(self, free_course, paid_course, collector):
        for course in (free_course, paid_course):
            course.subscribe(collector)
        free_course.attach_strategy(quiz_based)
        paid_course.attach_strategy(quiz_based)
        free_course.compute()   # 52.5 on a free course: certified
        paid_course.compute()   # 59.5 on a paid course: not certified

        df = records_to_frame(collector.records)
        assert certification_rate(df) == pytest.approx(0.5)
