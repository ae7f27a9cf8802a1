"""
🧠 UI FORMS - st.form() to prevent screen jump while typing
==========================================================
Forms batch inputs: no rerun until Submit. Layout stays fixed.
"""

import streamlit as st
from typing import Callable, List

from models import GridConfig


def parse_days(text: str) -> List[str]:
    """'Mon, Tue,,Wed' -> ['Mon', 'Tue', 'Wed']"""
    return [d.strip() for d in text.split(",") if d.strip()]


def render_subject_form(on_save: Callable[[str, str, int], None]) -> None:
    """Subject name, teacher, weekly hours. Calls on_save only when all three are filled."""
    with st.form("subject_form", clear_on_submit=True):
        c1, c2, c3 = st.columns([3, 3, 1])
        with c1:
            name = st.text_input("Subject Name", placeholder="e.g. Mathematics")
        with c2:
            teacher = st.text_input("Teacher", placeholder="e.g. Dr. Smith")
        with c3:
            hours = st.number_input("Weekly Hours", min_value=1, max_value=40, value=1)
        submitted = st.form_submit_button("Add Subject")

    if submitted and name.strip() and teacher.strip():
        on_save(name, teacher, int(hours))


def render_config_form(cfg: GridConfig, on_save: Callable[[GridConfig], None]) -> None:
    """Sidebar form for days, periods and the lunch period."""
    with st.sidebar.form("sidebar_config", clear_on_submit=False):
        st.markdown("**📆 Days & Periods**")
        days_input = st.text_input("Days (comma-separated)", value=",".join(cfg.days))
        periods = st.number_input("Periods per day", min_value=1, max_value=12, value=cfg.periods_per_day)
        lunch = st.number_input(
            "Lunch after period",
            min_value=1,
            max_value=12,
            value=cfg.lunch_after_period,
            help="This period is never scheduled.",
        )
        if st.form_submit_button("Apply Config"):
            on_save(GridConfig(days=parse_days(days_input), periods_per_day=int(periods), lunch_after_period=int(lunch)))
