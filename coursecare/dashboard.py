"""
dashboard.py — Streamlit front end
==================================
Browser version of the two demos:
  - Hospital Billing: admit a patient, pick a billing strategy, see the bill
    and the running totals for this session
  - Course Evaluation: evaluate a learner on a free or paid course

Usage:
    streamlit run coursecare/dashboard.py
"""

import plotly.express as px
import streamlit as st

from coursecare import config
from coursecare.categories import Admission, Course, CourseType, PatientType
from coursecare.entities import Learner, Patient
from coursecare.errors import ValidationError
from coursecare.records import describe_delta
from coursecare.reporting import (
    RecordCollector, bill_summary, certification_rate, records_to_frame, revenue_by_type,
)
from coursecare.strategies import DESCRIPTIONS, StrategyFactory, resolve_billing


# ==========================================
# SESSION STATE
# ==========================================
def get_collector():
    """One collector per browser session; it outlives reruns."""
    if "collector" not in st.session_state:
        st.session_state.collector = RecordCollector("Dashboard")
    return st.session_state.collector


# ==========================================
# HOSPITAL TAB
# ==========================================
def hospital_tab(collector):
    st.subheader("Admit a Patient")

    with st.form("admission"):
        c1, c2 = st.columns(2)
        patient_id = c1.number_input("Patient ID", min_value=1, step=1)
        name = c2.text_input("Patient Name")
        age = c1.number_input("Age", min_value=1, max_value=config.MAX_AGE - 1, value=30, step=1)
        disease = c2.text_input("Disease/Condition")
        patient_type = c1.selectbox("Patient Type", list(PatientType), format_func=lambda t: t.label)
        base_cost = c2.number_input(f"Base Treatment Cost ({config.CURRENCY})", min_value=0.0, value=1000.0)
        billing = st.selectbox("Billing Strategy", StrategyFactory.names("billing"),
                               format_func=lambda n: DESCRIPTIONS[n])
        submitted = st.form_submit_button("Admit and Bill")

    if submitted:
        try:
            patient = Patient(int(patient_id), name, int(age), disease)
            admission = Admission(patient_type, patient, base_cost)
            admission.subscribe_admission(collector)
            admission.subscribe(collector)
            admission.admit()

            strategy, description = resolve_billing(billing, patient.age)
            admission.attach_strategy(strategy)
            record = admission.generate_bill(description)

            st.success(f"{patient.name} admitted to {admission.variant_label()}. "
                       f"Final bill: {config.CURRENCY}{record.computed_value:,.2f}")
            st.caption(f"{description} · {describe_delta(record.input_value, record.computed_value)}")
        except ValidationError as e:
            st.error(f"Error: {e}")

    df = records_to_frame(collector.records)
    summary = bill_summary(df)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Patients Billed", summary["patients"])
    col2.metric("Total Base Cost", f"{config.CURRENCY}{summary['total_base']:,.2f}")
    col3.metric("Total Billed", f"{config.CURRENCY}{summary['total_billed']:,.2f}")
    col4.metric("Net Discount/Charge", f"{config.CURRENCY}{summary['net_delta']:,.2f}")

    st.divider()

    revenue = revenue_by_type(df)
    if not revenue.empty:
        fig_bar = px.bar(revenue, x="category_label", y="computed_value",
                         labels={"computed_value": f"Billed ({config.CURRENCY})", "category_label": "Patient Type"},
                         color="computed_value",
                         color_continuous_scale="Bluyl")
        st.plotly_chart(fig_bar, use_container_width=True)

    st.subheader("Bills This Session")
    bills = df[df["delta"].notna()] if not df.empty else df
    if not bills.empty:
        st.dataframe(bills.iloc[::-1], use_container_width=True)
    else:
        st.info("No bills generated yet.")


# ==========================================
# COURSE TAB
# ==========================================
def course_tab(collector):
    st.subheader("Evaluate a Learner")

    with st.form("evaluation"):
        c1, c2 = st.columns(2)
        learner_id = c1.number_input("Learner ID", min_value=1, step=1)
        name = c2.text_input("Learner Name")
        marks = c1.number_input("Total Marks", min_value=0.0, max_value=100.0, value=75.0)
        course_type = c2.selectbox("Course Type", list(CourseType), format_func=lambda t: t.label)
        fee = c1.number_input("Course Fee ($)", min_value=0.0, value=0.0)
        strategy = c2.selectbox("Evaluation Strategy", StrategyFactory.names("course"),
                                format_func=lambda n: DESCRIPTIONS[n])
        submitted = st.form_submit_button("Evaluate")

    if submitted:
        try:
            learner = Learner(int(learner_id), name, marks)
            course = Course(course_type, "Dashboard Course", "DASH101", learner, fee=fee)
            course.subscribe(collector)
            course.attach_strategy(StrategyFactory.get_strategy("course", strategy))
            record = course.evaluate()

            if record.certified:
                st.success(f"✓ {learner.name} scored {record.computed_value:.2f}% and is certified.")
            else:
                st.warning(f"✗ {learner.name} scored {record.computed_value:.2f}%; "
                           f"{course_type.label} requires {course_type.pass_mark:g}%.")
        except ValidationError as e:
            st.error(f"Error: {e}")

    df = records_to_frame(collector.records)
    st.metric("Certification Rate", f"{certification_rate(df) * 100:.0f}%")
    evaluations = df[df["certified"].notna()] if not df.empty else df
    if not evaluations.empty:
        st.dataframe(evaluations.iloc[::-1], use_container_width=True)
    else:
        st.info("No evaluations yet.")


# ==========================================
# MAIN APP
# ==========================================
def main():
    st.set_page_config(page_title="CourseCare", layout="wide")
    st.title("🏥 CourseCare: Evaluation & Billing")
    collector = get_collector()

    tab_hospital, tab_course = st.tabs(["Hospital Billing", "Course Evaluation"])
    with tab_hospital:
        hospital_tab(collector)
    with tab_course:
        course_tab(collector)

    with st.sidebar:
        st.header("Session")
        st.write(f"{len(collector.admissions)} admissions, {len(collector.records)} records")
        if st.button("Clear History"):
            del st.session_state.collector
            st.rerun()


if __name__ == "__main__":
    main()
