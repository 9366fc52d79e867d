"""
Immutable snapshots handed to notifiers when a category finishes an action.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from coursecare import config


@dataclass(frozen=True)
class CompletionRecord:
    """Result of one compute() call on a course or an admission."""

    subject_id: int
    subject_name: str
    input_value: float
    computed_value: float
    category_label: str
    certified: Optional[bool] = None   # courses only
    delta: Optional[float] = None      # bills only: computed_value - input_value
    strategy_name: str = "custom"
    billing_type: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_bill(self) -> bool:
        return self.delta is not None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AdmissionRecord:
    """A patient was admitted under a patient type."""

    patient_id: int
    patient_name: str
    patient_type: str
    timestamp: datetime = field(default_factory=datetime.now)


def describe_delta(base_cost, final_bill, currency=None) -> str:
    """Discount/charge line of a bill, e.g. '-₹400.00 (Discount)'."""
    currency = config.CURRENCY if currency is None else currency
    diff = final_bill - base_cost
    if diff < 0:
        return f"-{currency}{abs(diff):.2f} (Discount)"
    elif diff > 0:
        return f"+{currency}{diff:.2f} (Additional)"
    else:
        return "No Change"
