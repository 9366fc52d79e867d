"""
Tabular views of completion records for the dashboard.
"""
import pandas as pd

from coursecare.notifications import Notifier

RECORD_COLUMNS = [
    "timestamp", "subject_id", "subject_name", "category_label", "strategy_name",
    "billing_type", "input_value", "computed_value", "delta", "certified",
]


class RecordCollector(Notifier):
    """Notifier that keeps every record it receives instead of printing it."""

    def __init__(self, label=None):
        super().__init__(label)
        self.records = []
        self.admissions = []

    def format_completed(self, record) -> str:
        return f"{record.subject_name}: {record.computed_value:.2f}"

    def on_completed(self, record):
        self.records.append(record)

    def on_admitted(self, record):
        self.admissions.append(record)


def records_to_frame(records) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    df = pd.DataFrame([r.to_dict() for r in records])
    return df[RECORD_COLUMNS]


def bill_summary(df: pd.DataFrame) -> dict:
    """Totals over the bill rows of a records frame."""
    bills = df[df["delta"].notna()] if not df.empty else df
    if bills.empty:
        return {"patients": 0, "total_base": 0.0, "total_billed": 0.0, "net_delta": 0.0}
    return {
        "patients":     int(bills["subject_id"].nunique()),
        "total_base":   float(bills["input_value"].sum()),
        "total_billed": float(bills["computed_value"].sum()),
        "net_delta":    float(bills["delta"].sum()),
    }


def revenue_by_type(df: pd.DataFrame) -> pd.DataFrame:
    bills = df[df["delta"].notna()] if not df.empty else df
    if bills.empty:
        return pd.DataFrame(columns=["category_label", "computed_value"])
    return bills.groupby("category_label")["computed_value"].sum().reset_index()


def certification_rate(df: pd.DataFrame) -> float:
    evaluations = df[df["certified"].notna()] if not df.empty else df
    if evaluations.empty:
        return 0.0
    return float(evaluations["certified"].astype(bool).mean())
