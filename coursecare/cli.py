"""
cli.py — Console front end
==========================
Two demos over the coursecare core:
  - courses:  scripted course evaluation scenarios (free/paid, quiz/project/lambda)
  - hospital: interactive patient admission and billing desk

Usage:
    coursecare courses
    coursecare hospital [--log-level DEBUG]
"""

import argparse
import sys

from coursecare import config
from coursecare.categories import Admission, Course, CourseType, PatientType
from coursecare.entities import Learner, Patient
from coursecare.errors import ValidationError
from coursecare.log import setup_logging
from coursecare.notifications import DepartmentNotifier, LearnerNotifier
from coursecare.records import describe_delta
from coursecare.strategies import StrategyFactory, resolve_billing

# ── Config ────────────────────────────────────────────────────────────────────
WIDTH = 62

# (title, learner, course_type, course name, code, fee, strategy)
COURSE_SCENARIOS = [
    ("FREE COURSE - QUIZ-BASED",
     (101, "Alice Johnson", 75), CourseType.FREE, "Introduction to Python", "PY101", 0.0, "quiz"),
    ("PAID COURSE - PROJECT-BASED",
     (102, "Bob Smith", 85), CourseType.PAID, "Advanced Data Structures", "CS201", 199.99, "project"),
    ("FREE COURSE - FAILED STUDENT",
     (103, "Charlie Davis", 45), CourseType.FREE, "Python Basics", "PY102", 0.0, "quiz"),
    ("PAID COURSE - FAILED STUDENT",
     (104, "Diana Martinez", 65), CourseType.PAID, "Machine Learning Specialization", "ML301", 299.99, "project"),
    ("CUSTOM EVALUATION (LAMBDA)",
     (105, "Eve Williams", 80), CourseType.PAID, "Web Development Bootcamp", "WEB101", 149.99, None),
]

KEY_CONCEPTS = [
    "KEY CONCEPTS DEMONSTRATED",
    "✓ Encapsulation: Private marks with validated setter",
    "✓ Variants: Free and Paid courses share one Course type",
    "✓ Polymorphism: Different certification rules",
    "✓ Strategies: Pluggable evaluation functions",
    "✓ Lambda Expressions: Custom evaluation logic",
    "✓ Events: Evaluation completion notifications",
]

PATIENT_TYPE_MENU = {
    1: (PatientType.GENERAL, "General Ward (Basic medical care)", "admission"),
    2: (PatientType.EMERGENCY, "Emergency (Critical care - 50% surcharge)", "emergency"),
    3: (PatientType.ICU, "ICU (Intensive care - 24/7 monitoring)", "icu"),
}

BILLING_MENU = {
    1: ("standard", "Standard Billing (No discount/surcharge)"),
    2: ("insurance", "Insurance Coverage (40% discount)"),
    3: ("emergency", "Emergency Billing (50% surcharge)"),
    4: ("senior", f"Senior Citizen (30% discount - Age {config.SENIOR_AGE}+)"),
    5: ("vip", "VIP Package (20% premium for exclusive services)"),
}


# ── Helpers ───────────────────────────────────────────────────────────────────
def print_rows(rows, prefix=""):
    for label, value in rows:
        print(f"{prefix}{label}: {value}")


def print_banner(*lines):
    print("╔" + "═" * (WIDTH - 2) + "╗")
    for line in lines:
        print(f"║{line:^{WIDTH - 2}}║")
    print("╚" + "═" * (WIDTH - 2) + "╝")


def bill_summary_lines(admission, record):
    patient = admission.patient
    rows = [
        ("Patient ID", patient.entity_id),
        ("Patient Name", patient.name),
        ("Patient Type", admission.variant_label()),
        ("Disease", patient.disease),
        ("Base Cost", f"{config.CURRENCY}{record.input_value:.2f}"),
        ("Billing Type", record.billing_type),
        ("Final Bill", f"{config.CURRENCY}{record.computed_value:.2f}"),
        ("Discount/Charge", describe_delta(record.input_value, record.computed_value)),
    ]
    lines = ["┌" + "─" * (WIDTH - 2) + "┐", f"│{'BILL SUMMARY':^{WIDTH - 2}}│", "├" + "─" * (WIDTH - 2) + "┤"]
    for label, value in rows:
        lines.append(f"│ {label:<17}: {fit(value, WIDTH - 22)}│")
    lines.append("└" + "─" * (WIDTH - 2) + "┘")
    return lines


def fit(value, width):
    """Pads or cuts a value to exactly width characters."""
    text = str(value)
    if len(text) > width:
        text = text[:width - 3] + "..."
    return f"{text:<{width}}"


def prompt(text, cast=str, input_fn=input):
    raw = input_fn(text).strip()
    return cast(raw)


# ── Course demo ───────────────────────────────────────────────────────────────
def run_courses():
    print_banner("ONLINE LEARNING PLATFORM - COURSE EVALUATION SYSTEM")
    notifier = LearnerNotifier()
    learners = []

    for number, (title, learner_args, course_type, name, code, fee, strategy) in enumerate(COURSE_SCENARIOS, 1):
        print(f"\n********** SCENARIO {number}: {title} **********")
        learner = Learner(*learner_args)
        learners.append(learner)
        print_rows(learner.describe())

        course = Course(course_type, name, code, learner, fee=fee)
        print()
        print_rows(course.describe())
        course.subscribe(notifier)

        if strategy is None:
            course.attach_strategy(lambda marks: marks * 0.85)
        else:
            course.attach_strategy(StrategyFactory.get_strategy("course", strategy))

        print(f"\n--- Evaluating {learner.name} in {course.name} ---")
        print(f"Raw Marks: {learner.marks}")
        record = course.evaluate()
        print(f"Calculated Score: {record.computed_value:.2f}%")

    print("\n********** DEMONSTRATING ENCAPSULATION **********")
    print("Updating learner marks using setter method...")
    for new_marks in (90, 150):
        try:
            learners[0].set_marks(new_marks)
            print(f"Updated marks for {learners[0].name}: {learners[0].marks}")
        except ValidationError as e:
            print(f"Error: {e}")

    print()
    print_banner(*KEY_CONCEPTS)
    return 0


# ── Hospital demo ─────────────────────────────────────────────────────────────
def admit_one(departments, input_fn=input):
    """Runs one pass of the admission desk. Returns the bill record."""
    print("\n" + "═" * WIDTH)
    print(f"{'PATIENT ADMISSION AND BILLING SYSTEM':^{WIDTH}}")
    print("═" * WIDTH)

    print("\n📋 PATIENT INFORMATION")
    print("─" * WIDTH)
    patient_id = prompt("Patient ID: ", int, input_fn)
    patient_name = prompt("Patient Name: ", str, input_fn)
    patient_age = prompt("Age: ", int, input_fn)
    disease = prompt("Disease/Condition: ", str, input_fn)
    patient = Patient(patient_id, patient_name, patient_age, disease)

    print("\n PATIENT TYPE SELECTION")
    print("─" * WIDTH)
    for number, (_, description, _) in PATIENT_TYPE_MENU.items():
        print(f"{number}. {description}")
    type_choice = prompt("\nSelect Patient Type (1-3): ", int, input_fn)
    if type_choice not in PATIENT_TYPE_MENU:
        print(" Invalid patient type selection!")
        return None

    print("\n TREATMENT COST")
    print("─" * WIDTH)
    base_cost = prompt(f"Base Treatment Cost ({config.CURRENCY}): ", float, input_fn)

    patient_type, _, department = PATIENT_TYPE_MENU[type_choice]
    admission = Admission(patient_type, patient, base_cost)
    admission.subscribe_admission(departments[department])
    admission.subscribe(departments["billing"])

    print("\n" + "═" * WIDTH)
    print(f"  ADMITTING PATIENT: {patient.name}")
    print("═" * WIDTH)
    print_rows(patient.describe(), prefix="├─ ")
    print(f"  Patient Type: {admission.variant_label()}")
    print(f"  {admission.treatment_details()}")
    print("═" * WIDTH + "\n")
    admission.admit()

    print("\n BILLING STRATEGY")
    print("─" * WIDTH)
    for number, (_, description) in BILLING_MENU.items():
        print(f"{number}. {description}")
    billing_choice = prompt("\nSelect Billing Type (1-5): ", int, input_fn)

    name = BILLING_MENU.get(billing_choice, ("",))[0]
    strategy, description = resolve_billing(name, patient.age)
    if name == "senior" and description.startswith("Standard"):
        print(f"\n⚠ Patient age is below {config.SENIOR_AGE}. Applying standard billing instead.")
    elif not name:
        print(" Invalid billing choice! Applying standard billing.")
    admission.attach_strategy(strategy)

    record = admission.generate_bill(description)
    print("\n".join(bill_summary_lines(admission, record)))
    print("\n✓ Patient processing completed successfully!")
    return record


def run_hospital(input_fn=input):
    print_banner("HOSPITAL PATIENT MANAGEMENT SYSTEM v1.0", "Console-Based Healthcare Solution")
    departments = {key: DepartmentNotifier(name) for key, name in config.DEPARTMENTS.items()}
    records = []

    while True:
        try:
            record = admit_one(departments, input_fn)
            if record is not None:
                records.append(record)
        except ValidationError as e:
            print(f"\n ERROR: {e}")
        except ValueError:
            print("\n ERROR: Invalid input format! Please enter valid data.")

        print("\n" + "═" * WIDTH)
        response = input_fn("Do you want to admit another patient? (Y/N): ").strip().upper()
        if response not in ("Y", "YES"):
            break

    print("\n✓ Thank you for using Hospital Patient Management System!")
    return records


# ── Main ──────────────────────────────────────────────────────────────────────
def build_parser():
    parser = argparse.ArgumentParser(prog="coursecare", description="Course evaluation and hospital billing demos")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        type=str.upper)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("courses", help="Run the scripted course evaluation scenarios")
    sub.add_parser("hospital", help="Start the interactive admission and billing desk")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == "courses":
            return run_courses()
        run_hospital()
        return 0
    except (KeyboardInterrupt, EOFError):
        print("\nExiting.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
