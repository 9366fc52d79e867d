import math
from abc import ABC, abstractmethod
from datetime import datetime

from coursecare import config
from coursecare.errors import ValidationError


# Base Class #
class Entity(ABC):
    """A person being evaluated or billed. Holds one bounded numeric attribute."""

    value_name = "value"

    def __init__(self, entity_id, name, value):
        if isinstance(entity_id, bool) or not isinstance(entity_id, int):
            raise ValidationError(f"ID must be an integer, got {entity_id!r}", "entity_id", entity_id)
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Name must not be empty", "name", name)

        self._entity_id = entity_id
        self._name = name.strip()
        self._value = self._validate(value)

    @property
    def entity_id(self):
        return self._entity_id

    @property
    def name(self):
        return self._name

    @property
    def value(self):
        return self._value

    def set_value(self, value):
        """Replaces the attribute in place. A rejected value leaves the old one untouched."""
        self._value = self._validate(value)

    @abstractmethod
    def in_bounds(self, value) -> bool:
        pass

    @abstractmethod
    def bounds_text(self) -> str:
        pass

    def _validate(self, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(
                f"{self.value_name.capitalize()} must be a number, got {value!r}",
                self.value_name, value,
            )
        if (isinstance(value, float) and math.isnan(value)) or not self.in_bounds(value):
            raise ValidationError(
                f"{self.value_name.capitalize()} must be {self.bounds_text()}",
                self.value_name, value,
            )
        return value

    def describe(self):
        """Rows shown by the console and dashboard front ends."""
        return [("ID", self._entity_id), ("Name", self._name)]


class Learner(Entity):
    """A learner enrolled on a course. Marks are kept between 0 and 100."""

    value_name = "marks"

    def __init__(self, learner_id, name, marks):
        super().__init__(learner_id, name, marks)

    @property
    def marks(self):
        return self._value

    def set_marks(self, marks):
        self.set_value(marks)

    def in_bounds(self, value) -> bool:
        return config.MIN_MARKS <= value <= config.MAX_MARKS

    def bounds_text(self) -> str:
        return f"between {config.MIN_MARKS:g} and {config.MAX_MARKS:g}"

    def describe(self):
        return [("Learner ID", self.entity_id), ("Learner Name", self.name), ("Total Marks", self.marks)]


class Patient(Entity):
    """A hospital patient. Age is the bounded attribute; admission time is fixed at creation."""

    value_name = "age"

    def __init__(self, patient_id, name, age, disease):
        super().__init__(patient_id, name, age)
        self._disease = self._validate_disease(disease)
        self._admission_date = datetime.now()

    @property
    def age(self):
        return self._value

    def set_age(self, age):
        self.set_value(age)

    @property
    def disease(self):
        return self._disease

    def set_disease(self, disease):
        self._disease = self._validate_disease(disease)

    @property
    def admission_date(self):
        return self._admission_date

    def in_bounds(self, value) -> bool:
        return config.MIN_AGE < value < config.MAX_AGE

    def bounds_text(self) -> str:
        return f"greater than {config.MIN_AGE} and less than {config.MAX_AGE}"

    @staticmethod
    def _validate_disease(disease):
        if not isinstance(disease, str) or not disease.strip():
            raise ValidationError("Disease/condition must not be empty", "disease", disease)
        return disease.strip()

    def describe(self):
        return [
            ("Patient ID", self.entity_id),
            ("Name", self.name),
            ("Age", self.age),
            ("Disease", self.disease),
            ("Admission Date", self.admission_date.strftime("%d-%b-%Y %H:%M")),
        ]
