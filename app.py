"""
🧠 TIMETABLE GENERATOR
=====================
- Add subjects (name, teacher, weekly hours) or load the demo list
- Generate a clash-free weekly grid with lunch kept free
- Fix cells by hand, check the insights, download Excel / PDF
State lives in st.session_state only.
"""

import logging
from datetime import date

import streamlit as st

from excel_export import export_subjects_xlsx, export_timetable_xlsx
from grid_format import apply_edits, display_values, to_display_grid
from heatmaps import (
    display_grid_to_frame, style_display_grid,
    render_teacher_load_heatmap, render_day_utilization_heatmap,
)
from models import GridConfig, InvalidConfiguration, demo_subjects, new_subject
from pdf_export import export_subjects_pdf, export_timetable_pdf
from solver import add_colors_to_subjects, schedule_with_report, teacher_timetables
from stats import compute_stats
from ui_forms import render_config_form, render_subject_form

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Timetable Generator", page_icon="📅", layout="wide")


# ---------------------------------------------------------------------------
# SESSION STATE
# ---------------------------------------------------------------------------

def _init_session():
    if "subjects" not in st.session_state:
        st.session_state.subjects = []
    if "config" not in st.session_state:
        st.session_state.config = GridConfig()
    if "result" not in st.session_state:
        st.session_state.result = None
    if "display_grid" not in st.session_state:
        st.session_state.display_grid = None


def _reset_timetable():
    st.session_state.result = None
    st.session_state.display_grid = None


_init_session()


# ---------------------------------------------------------------------------
# SIDEBAR - Config
# ---------------------------------------------------------------------------

st.sidebar.title("⚙️ School Setup")


def _on_config_save(cfg: GridConfig):
    try:
        st.session_state.config = cfg.validate()
    except InvalidConfiguration as e:
        st.sidebar.error(str(e))
        return
    _reset_timetable()
    st.rerun()


render_config_form(st.session_state.config, _on_config_save)

st.sidebar.markdown("---")
if st.sidebar.button("🧪 Load Demo Subjects"):
    st.session_state.subjects = demo_subjects()
    _reset_timetable()
    st.rerun()
if st.sidebar.button("🗑️ Clear subjects"):
    st.session_state.subjects = []
    _reset_timetable()
    st.rerun()


# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------

st.title("📅 Timetable Generator")
cfg = st.session_state.config
today = date.today().isoformat()

st.header("1. Subjects")


def _on_subject_save(name: str, teacher: str, hours: int):
    st.session_state.subjects.append(new_subject(name, teacher, hours))
    _reset_timetable()
    st.rerun()


render_subject_form(_on_subject_save)

subjects = st.session_state.subjects
if subjects:
    total = sum(s.weekly_hours for s in subjects)
    st.caption(f"{len(subjects)} subjects, {total} hours requested, {cfg.capacity()} slots available")
    for i, s in enumerate(subjects):
        c1, c2 = st.columns([5, 1])
        with c1:
            st.markdown(f"**{s.name}** · {s.teacher} · {s.weekly_hours}h/week")
        with c2:
            if st.button("Remove", key=f"s_rm_{s.id}"):
                st.session_state.subjects.pop(i)
                _reset_timetable()
                st.rerun()

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "📥 Subjects (Excel)", data=export_subjects_xlsx(subjects),
            file_name=f"subjects-{today}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
    with col2:
        st.download_button(
            "📥 Subjects (PDF)", data=export_subjects_pdf(subjects),
            file_name=f"subjects-{today}.pdf", mime="application/pdf",
        )
else:
    st.info("Add subjects above or load the demo list from the sidebar.")

st.markdown("---")
st.header("2. Timetable")

if st.button("🚀 Generate Timetable", type="primary", disabled=not subjects):
    try:
        result = schedule_with_report(subjects, cfg.days, cfg.periods_per_day, cfg.lunch_after_period)
    except InvalidConfiguration as e:
        st.error(str(e))
    else:
        logger.info("Generated timetable for %d subjects (%d short)", len(subjects), len(result.unplaced))
        st.session_state.subjects = add_colors_to_subjects(subjects)
        st.session_state.result = result
        st.session_state.display_grid = to_display_grid(
            result.grid, cfg.days, st.session_state.subjects, lunch_marker_period=cfg.lunch_after_period,
        )

result = st.session_state.result
display_grid = st.session_state.display_grid
if result is not None and display_grid is not None:
    if result.unplaced:
        names = {s.id: s.name for s in st.session_state.subjects}
        st.warning(
            "Not everything fit: "
            + ", ".join(f"{names.get(sid, sid)} ({left}h short)" for sid, left in result.unplaced.items())
        )
    else:
        st.success("Every subject got all its hours.")

    st.dataframe(style_display_grid(display_grid), use_container_width=True)

    with st.expander("✏️ Edit cells"):
        frame = display_grid_to_frame(display_grid)
        edited = st.data_editor(frame, use_container_width=True, key="grid_editor")
        if st.button("Apply edits"):
            values = [display_values(display_grid)[0]] + [
                [label] + [v if v is not None else "" for v in row]
                for label, row in zip(edited.index, edited.values.tolist())
            ]
            st.session_state.display_grid = apply_edits(display_grid, values)
            st.rerun()

    with st.expander("👨‍🏫 Teacher view"):
        for teacher, slots in sorted(teacher_timetables(result.grid).items()):
            listing = ", ".join(f"{s.day} P{s.period} ({s.subject})" for _, s in sorted(slots.items()))
            st.markdown(f"**{teacher}**: {listing}")

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "📥 Timetable (Excel)", data=export_timetable_xlsx(display_grid),
            file_name=f"timetable-{today}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
    with col2:
        st.download_button(
            "📥 Timetable (PDF)", data=export_timetable_pdf(display_grid),
            file_name=f"timetable-{today}.pdf", mime="application/pdf",
        )

    st.markdown("---")
    st.header("🔥 Insights")
    stats = compute_stats(display_grid, cfg.days, st.session_state.subjects)
    m1, m2, m3 = st.columns(3)
    m1.metric("Total Utilization", f"{stats.utilization:.1f}%")
    m2.metric("Subjects", len(stats.subjects))
    m3.metric("Teachers", len(stats.teachers))
    st.dataframe(render_day_utilization_heatmap(stats), use_container_width=True)
    if stats.teachers:
        st.dataframe(render_teacher_load_heatmap(stats, cfg.days), use_container_width=True)
    for s in stats.under_scheduled():
        st.write(f"• {s.name} ({s.teacher}): {s.total_hours}/{s.weekly_hours} hours")
