"""
Unit Tests for Learner and Patient
"""
import math

import pytest

from coursecare.entities import Entity, Learner, Patient
from coursecare.errors import ValidationError


class TestLearner:
    """Tests for Learner marks validation."""

    @pytest.mark.parametrize("marks", [0, 0.5, 50, 99.999, 100])
    def test_set_marks_in_bounds(self, alice, marks):
        """Any value in [0, 100] is stored as given."""
        alice.set_marks(marks)
        assert alice.marks == marks
        assert alice.value == marks

    @pytest.mark.parametrize("marks", [-0.001, -5, 100.001, 150, math.nan, math.inf, 10**400, -10**400])
    def test_set_marks_out_of_bounds(self, alice, marks):
        """Out-of-range writes fail and leave the stored marks alone."""
        with pytest.raises(ValidationError) as exc:
            alice.set_marks(marks)
        assert exc.value.field == "marks"
        assert alice.marks == 75

    def test_rejects_non_numeric_marks(self, alice):
        """Strings and booleans are not marks."""
        with pytest.raises(ValidationError):
            alice.set_marks("80")
        with pytest.raises(ValidationError):
            alice.set_marks(True)
        assert alice.marks == 75

    def test_construct_out_of_bounds(self):
        """Construction uses the same bound check."""
        with pytest.raises(ValidationError):
            Learner(1, "Zed", 101)

    def test_construct_empty_name(self):
        """Blank names are rejected."""
        with pytest.raises(ValidationError) as exc:
            Learner(1, "   ", 50)
        assert exc.value.field == "name"

    def test_construct_non_integer_id(self):
        """Identifiers must be integers."""
        with pytest.raises(ValidationError):
            Learner("101", "Alice", 50)

    def test_accessors(self, alice):
        """Getters return the constructor values."""
        assert alice.entity_id == 101
        assert alice.name == "Alice Johnson"
        assert alice.marks == 75

    def test_validation_error_is_value_error(self):
        """Callers catching ValueError also catch validation failures."""
        with pytest.raises(ValueError):
            Learner(1, "Zed", -1)


class TestEntityBase:
    """Tests for the abstract Entity base."""

    def test_cannot_instantiate(self):
        """Entity needs a concrete bound, so only subclasses can be built."""
        with pytest.raises(TypeError):
            Entity(1, "Alice", 50)


class TestPatient:
    """Tests for Patient validation."""

    def test_accessors(self, patient):
        """Getters return the constructor values."""
        assert patient.entity_id == 201
        assert patient.name == "Ravi Kumar"
        assert patient.age == 45
        assert patient.disease == "Fractured arm"
        assert patient.admission_date is not None

    @pytest.mark.parametrize("age", [0, 150, -3])
    def test_age_bounds_are_exclusive(self, patient, age):
        """Age must be strictly between 0 and 150."""
        with pytest.raises(ValidationError):
            patient.set_age(age)
        assert patient.age == 45

    def test_set_age(self, patient):
        """A valid age replaces the stored one."""
        patient.set_age(149)
        assert patient.age == 149

    def test_set_disease_blank(self, patient):
        """A blank condition is rejected and the old one kept."""
        with pytest.raises(ValidationError):
            patient.set_disease("  ")
        assert patient.disease == "Fractured arm"

    def test_construct_invalid_age(self):
        """Construction validates age."""
        with pytest.raises(ValidationError):
            Patient(1, "Old Timer", 200, "Flu")

    def test_describe(self, patient):
        """describe() lists the printable rows."""
        labels = [label for label, _ in patient.describe()]
        assert labels == ["Patient ID", "Name", "Age", "Disease", "Admission Date"]
