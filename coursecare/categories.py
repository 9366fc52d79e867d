"""
Course and patient categories.

A category wraps one entity, holds a pluggable strategy and a list of
subscribed notifiers. compute() applies the strategy to the entity's
numeric attribute, classifies the result by the category's variant and
delivers a CompletionRecord to every subscriber before returning it.

Variants are enum members carrying their own constants (pass mark, label,
treatment text); the outcome rule is picked by tag rather than by subclass.
"""
from abc import ABC, abstractmethod
from enum import Enum

from coursecare import config
from coursecare import strategies
from coursecare.errors import ValidationError
from coursecare.log import get_logger
from coursecare.records import AdmissionRecord, CompletionRecord

logger = get_logger(__name__)


class CourseType(Enum):
    FREE = ("Free Course", config.FREE_PASS_MARK)
    PAID = ("Paid Course", config.PAID_PASS_MARK)

    def __init__(self, label, pass_mark):
        self.label = label
        self.pass_mark = pass_mark


class PatientType(Enum):
    GENERAL = ("General Ward", "General Ward - Basic medical care")
    EMERGENCY = ("Emergency", "Emergency - Immediate critical care")
    ICU = ("ICU - Intensive Care", "ICU - 24/7 intensive monitoring")

    def __init__(self, label, treatment):
        self.label = label
        self.treatment = treatment


def _coerce(enum_cls, value):
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown {enum_cls.__name__}: {value}") from None
    return enum_cls(value)


def _validate_amount(amount, field):
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not amount >= 0:
        raise ValidationError(f"{field.replace('_', ' ').capitalize()} must be a non-negative number", field, amount)
    return amount


class _ObserverList:
    """Ordered, duplicate-free list of subscribers."""

    def __init__(self):
        self._items = []

    def add(self, observer):
        if not any(item is observer for item in self._items):
            self._items.append(observer)

    def remove(self, observer):
        self._items = [item for item in self._items if item is not observer]

    def snapshot(self):
        return list(self._items)

    def __len__(self):
        return len(self._items)

    def __contains__(self, observer):
        return any(item is observer for item in self._items)


# 1. The shared capability
class Category(ABC):
    """Base for Course and Admission: strategy slot plus completion subscribers."""

    strategy_kind = "evaluation"

    def __init__(self, entity):
        self._entity = entity
        self._strategy = None
        self._subscribers = _ObserverList()

    @property
    def entity(self):
        return self._entity

    @property
    def strategy(self):
        return self._strategy

    @property
    def is_ready(self) -> bool:
        return self._strategy is not None

    @property
    def subscribers(self):
        return self._subscribers.snapshot()

    def attach_strategy(self, fn):
        if not callable(fn):
            raise TypeError(f"Strategy must be callable, got {type(fn).__name__}")
        self._strategy = fn

    def subscribe(self, notifier):
        self._subscribers.add(notifier)

    def unsubscribe(self, notifier):
        self._subscribers.remove(notifier)

    @abstractmethod
    def variant_label(self) -> str:
        pass

    def compute(self, **kwargs):
        if self._strategy is None:
            logger.warning("No %s strategy set for %s; nothing computed", self.strategy_kind, self._entity.name)
            return None

        input_value = self._input_value()
        computed = self._strategy(input_value)
        record = self._build_record(input_value, computed, **kwargs)
        logger.debug("%s computed %s -> %s", self.variant_label(), input_value, computed)

        for notifier in self._subscribers.snapshot():
            notifier.on_completed(record)
        return record

    @abstractmethod
    def _input_value(self):
        pass

    @abstractmethod
    def _build_record(self, input_value, computed, **kwargs):
        pass


# 2. Course evaluation
class Course(Category):
    """A free or paid course taken by one learner."""

    def __init__(self, course_type, name, code, learner, fee=0.0):
        super().__init__(learner)
        self.course_type = _coerce(CourseType, course_type)
        self.name = name
        self.code = code
        self.fee = _validate_amount(fee, "fee")

    @property
    def learner(self):
        return self._entity

    def variant_label(self) -> str:
        if self.course_type is CourseType.PAID:
            return f"{self.course_type.label} (Fee: ${self.fee:.2f})"
        return self.course_type.label

    def is_certified(self, score) -> bool:
        return score >= self.course_type.pass_mark

    def compute(self):
        return super().compute()

    def evaluate(self):
        return self.compute()

    def _input_value(self):
        return self.learner.marks

    def _build_record(self, input_value, computed):
        return CompletionRecord(
            subject_id=self.learner.entity_id,
            subject_name=self.learner.name,
            input_value=input_value,
            computed_value=computed,
            category_label=self.variant_label(),
            certified=self.is_certified(computed),
            strategy_name=strategies.strategy_name(self._strategy),
        )

    def describe(self):
        return [("Course Name", self.name), ("Course Code", self.code), ("Course Type", self.variant_label())]


# 3. Hospital admission and billing
class Admission(Category):
    """A patient admitted under one patient type, billed from a base treatment cost."""

    strategy_kind = "billing"

    def __init__(self, patient_type, patient, base_cost):
        super().__init__(patient)
        self.patient_type = _coerce(PatientType, patient_type)
        self.base_cost = _validate_amount(base_cost, "base_cost")
        self._admission_subscribers = _ObserverList()

    @property
    def patient(self):
        return self._entity

    def variant_label(self) -> str:
        return self.patient_type.label

    def treatment_details(self) -> str:
        return f"Treatment: {self.patient_type.treatment}"

    def subscribe_admission(self, notifier):
        self._admission_subscribers.add(notifier)

    def unsubscribe_admission(self, notifier):
        self._admission_subscribers.remove(notifier)

    def admit(self) -> AdmissionRecord:
        record = AdmissionRecord(
            patient_id=self.patient.entity_id,
            patient_name=self.patient.name,
            patient_type=self.variant_label(),
        )
        logger.info("Admitted %s as %s", record.patient_name, record.patient_type)
        for notifier in self._admission_subscribers.snapshot():
            notifier.on_admitted(record)
        return record

    def compute(self, billing_type=None):
        return super().compute(billing_type=billing_type)

    def generate_bill(self, billing_type=None):
        return self.compute(billing_type=billing_type)

    def _input_value(self):
        return self.base_cost

    def _build_record(self, input_value, computed, billing_type=None):
        if billing_type is None:
            billing_type = strategies.describe(self._strategy) or "Custom Billing"
        return CompletionRecord(
            subject_id=self.patient.entity_id,
            subject_name=self.patient.name,
            input_value=input_value,
            computed_value=computed,
            category_label=self.variant_label(),
            delta=computed - input_value,
            strategy_name=strategies.strategy_name(self._strategy),
            billing_type=billing_type,
        )
