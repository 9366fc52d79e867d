"""
Policy constants and environment-driven settings.
"""
import os

# ── Course policy ─────────────────────────────────────────────────────────────
MIN_MARKS = 0.0
MAX_MARKS = 100.0
FREE_PASS_MARK = 50.0
PAID_PASS_MARK = 70.0

# ── Hospital policy ───────────────────────────────────────────────────────────
# Patient age must satisfy MIN_AGE < age < MAX_AGE
MIN_AGE = 0
MAX_AGE = 150
SENIOR_AGE = 60

DEPARTMENTS = {
    "admission": "Admission Department",
    "billing":   "Billing Department",
    "emergency": "Emergency Department",
    "icu":       "ICU Department",
}

# ── Environment ───────────────────────────────────────────────────────────────
CURRENCY = os.getenv("COURSECARE_CURRENCY", "₹")
LOG_LEVEL = os.getenv("COURSECARE_LOG_LEVEL", "INFO")
