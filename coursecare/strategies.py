"""
Catalogue of scoring and billing strategies.

A strategy is any callable taking one number and returning one number.
The functions below are the named catalogue entries; callers may pass
their own lambdas to a category instead and they are treated the same way.
"""
from coursecare import config


# ── Course evaluation ─────────────────────────────────────────────────────────
def quiz_based(marks):
    return marks * 0.7  # 70% weightage


def project_based(marks):
    return marks * 0.9  # 90% weightage


custom_based = lambda marks: marks * 0.8


# ── Billing ───────────────────────────────────────────────────────────────────
def standard_billing(base_cost):
    return base_cost


def insurance_billing(base_cost):
    return base_cost * 0.60  # 40% discount


def emergency_billing(base_cost):
    return base_cost * 1.50  # 50% surcharge


def senior_citizen_billing(base_cost):
    return base_cost * 0.70  # 30% discount


vip_billing = lambda base_cost: base_cost * 1.20


COURSE_STRATEGIES = {
    "quiz":    quiz_based,
    "project": project_based,
    "custom":  custom_based,
}

BILLING_STRATEGIES = {
    "standard":  standard_billing,
    "insurance": insurance_billing,
    "emergency": emergency_billing,
    "senior":    senior_citizen_billing,
    "vip":       vip_billing,
}

DESCRIPTIONS = {
    "quiz":      "Quiz-based Evaluation (70% weightage)",
    "project":   "Project-based Evaluation (90% weightage)",
    "custom":    "Custom Evaluation (80% weightage)",
    "standard":  "Standard Billing (No discount)",
    "insurance": "Insurance Coverage (40% discount)",
    "emergency": "Emergency Billing (50% surcharge)",
    "senior":    "Senior Citizen (30% discount)",
    "vip":       "VIP Package (20% premium)",
}

CATALOGUES = {
    "course":  COURSE_STRATEGIES,
    "billing": BILLING_STRATEGIES,
}


class StrategyFactory:
    @staticmethod
    def get_strategy(kind: str, name: str):
        kind = kind.lower().strip()
        name = name.lower().strip()

        if kind not in CATALOGUES:
            raise ValueError(f"Unknown strategy kind: {kind}")
        catalogue = CATALOGUES[kind]
        if name not in catalogue:
            raise ValueError(f"Unknown {kind} strategy: {name}")
        return catalogue[name]

    @staticmethod
    def names(kind: str):
        return list(CATALOGUES[kind.lower().strip()])


def strategy_name(fn) -> str:
    """Catalogue name of a strategy, or 'custom' for an ad-hoc callable."""
    for catalogue in CATALOGUES.values():
        for name, entry in catalogue.items():
            if entry is fn:
                return name
    return "custom"


def describe(fn):
    """Human description of a catalogue strategy, or None for ad-hoc callables."""
    for catalogue in CATALOGUES.values():
        for name, entry in catalogue.items():
            if entry is fn:
                return DESCRIPTIONS[name]
    return None


def resolve_billing(name: str, age):
    """
    Admission-desk selection of a billing strategy.

    Unlike StrategyFactory this never fails: a senior discount for a patient
    younger than SENIOR_AGE and an unknown name both fall back to standard
    billing, with the description saying why.

    Returns:
        (strategy, description)
    """
    name = (name or "").lower().strip()

    if name == "senior" and age < config.SENIOR_AGE:
        return standard_billing, f"Standard Billing (Age < {config.SENIOR_AGE})"
    if name not in BILLING_STRATEGIES:
        return standard_billing, "Standard Billing (Default)"
    return BILLING_STRATEGIES[name], DESCRIPTIONS[name]
