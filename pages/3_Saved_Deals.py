"""
Saved Deals Page - save/load deals and profiles, Excel export
"""
import logging
import streamlit as st
import pandas as pd

from components.styles import get_page_css, page_header
from components.formatting import fmt_compact, fmt_pct
from components.sidebar import render_logo, load_into_form
from components.storage import get_repositories
from jusur_engine.export import create_excel_workbook, export_results_to_csv, export_filename
from jusur_engine.persistence import SnapshotNotFoundError

logger = logging.getLogger(__name__)

# Page config
st.set_page_config(
    page_title="Saved Deals | Jusur Calc",
    page_icon="💾",
    layout="wide",
)

dark = st.session_state.get("dark", False)
st.markdown(get_page_css(dark), unsafe_allow_html=True)
render_logo()

deals, profiles = get_repositories()
deal = st.session_state.get("deal")

st.markdown(page_header(
    "Saved Deals & Export",
    "Save deal snapshots and input profiles, download reports",
), unsafe_allow_html=True)

# -----------------------------------------------------------------------------
# SAVE CURRENT
# -----------------------------------------------------------------------------
if deal is None:
    st.warning("⚠️ No deal configured. Enter a deal in the Calculator to save or export it.")
    st.page_link("app.py", label="→ Go to Calculator")
else:
    model, inputs, results = deal["model"], deal["inputs"], deal["results"]

    st.subheader("Current Deal")
    name = st.text_input("Name", value=st.session_state.get("deal_name", "Untitled Deal"))
    st.session_state["deal_name"] = name

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        if st.button("Save Deal", use_container_width=True):
            try:
                snapshot = deals.save(name, model, inputs, results)
                st.success(f"Saved deal '{snapshot.name}'")
            except OSError as e:
                logger.error(f"Saving deal failed: {e}")
                st.error(f"Could not save deal: {e}")
    with col2:
        if st.button("Save as Profile", use_container_width=True):
            try:
                profile = profiles.save(name, model, inputs)
                st.success(f"Saved profile '{profile.name}'")
            except OSError as e:
                logger.error(f"Saving profile failed: {e}")
                st.error(f"Could not save profile: {e}")
    with col3:
        st.download_button(
            "Download CSV",
            data=export_results_to_csv(model, inputs, results),
            file_name=export_filename(model),
            mime="text/csv",
            use_container_width=True,
        )
    with col4:
        st.download_button(
            "Download Excel",
            data=create_excel_workbook(model, inputs, results, deal_name=name),
            file_name=export_filename(model, "xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            use_container_width=True,
        )

st.divider()


def _load(record_model, record_inputs):
    load_into_form(record_model, record_inputs)
    st.session_state.pop("deal", None)
    st.switch_page("app.py")


# -----------------------------------------------------------------------------
# SAVED DEALS
# -----------------------------------------------------------------------------
tab_deals, tab_profiles = st.tabs(["Saved Deals", "Profiles"])

with tab_deals:
    try:
        saved = deals.list_all()
    except (OSError, ValueError) as e:
        st.error(f"Could not read saved deals: {e}")
        saved = []

    if not saved:
        st.caption("No saved deals yet.")
    else:
        st.dataframe(pd.DataFrame([
            {
                "Name": s.name,
                "Saved": s.created_at.strftime("%Y-%m-%d %H:%M"),
                "Model": s.model.label,
                "Total Profit": fmt_compact(s.results.total_profit),
                "Investor ROI": fmt_pct(s.results.investor_roi_pct),
                "Your Share": fmt_compact(s.results.your_share),
            }
            for s in saved
        ]), hide_index=True, use_container_width=True)

        choice = st.selectbox(
            "Deal",
            options=[s.id for s in saved],
            format_func=lambda i: next(s.name for s in saved if s.id == i),
        )
        load_col, delete_col, _ = st.columns([1, 1, 4])
        with load_col:
            if st.button("Load Deal"):
                try:
                    snapshot = deals.get(choice)
                except SnapshotNotFoundError:
                    st.warning("Deal was deleted in another session")
                else:
                    _load(snapshot.model, snapshot.inputs)
        with delete_col:
            if st.button("Delete Deal"):
                try:
                    deals.delete(choice)
                except SnapshotNotFoundError:
                    st.warning("Deal was already deleted")
                st.rerun()

with tab_profiles:
    try:
        saved_profiles = profiles.list_all()
    except (OSError, ValueError) as e:
        st.error(f"Could not read profiles: {e}")
        saved_profiles = []

    if not saved_profiles:
        st.caption("No profiles yet.")
    else:
        choice = st.selectbox(
            "Profile",
            options=[p.id for p in saved_profiles],
            format_func=lambda i: next(
                f"{p.name} ({p.model.label})" for p in saved_profiles if p.id == i
            ),
        )
        load_col, delete_col, _ = st.columns([1, 1, 4])
        with load_col:
            if st.button("Apply Profile"):
                try:
                    profile = profiles.get(choice)
                except SnapshotNotFoundError:
                    st.warning("Profile was deleted in another session")
                else:
                    _load(profile.model, profile.inputs)
        with delete_col:
            if st.button("Delete Profile"):
                try:
                    profiles.delete(choice)
                except SnapshotNotFoundError:
                    st.warning("Profile was already deleted")
                st.rerun()
