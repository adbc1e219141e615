"""
Sensitivity Page - outcomes across profit levels for every model
"""
import streamlit as st

from components.styles import get_page_css, page_header
from components.formatting import fmt_compact
from components.sidebar import render_logo
from components.charts import create_sensitivity_chart
from jusur_engine.sensitivity import sensitivity, sweep_to_frame
from jusur_engine.export import export_sensitivity_to_csv

# Page config
st.set_page_config(
    page_title="Sensitivity | Jusur Calc",
    page_icon="📈",
    layout="wide",
)

dark = st.session_state.get("dark", False)
st.markdown(get_page_css(dark), unsafe_allow_html=True)
render_logo()

if "deal" not in st.session_state:
    st.warning("⚠️ No deal configured. Please enter your deal in the Calculator first.")
    st.page_link("app.py", label="→ Go to Calculator")
    st.stop()

deal = st.session_state["deal"]
inputs, results = deal["inputs"], deal["results"]

st.markdown(page_header(
    "Sensitivity Analysis",
    f"Profit from 50% to 150% of the current {fmt_compact(results.total_profit)}",
), unsafe_allow_html=True)

sweep = sensitivity(inputs, results)
if len(sweep) == 0:
    st.info("Sensitivity needs a profitable deal. Adjust the sale price or costs in the Calculator.")
    st.stop()

frame = sweep_to_frame(sweep)

metric = st.radio(
    "Show",
    ["Cut", "Investor"],
    format_func=lambda m: "Jusur Profit Cut" if m == "Cut" else "Investor Profit",
    horizontal=True,
)
st.plotly_chart(create_sensitivity_chart(frame, metric, dark), use_container_width=True)

display = frame.copy()
display["Multiplier"] = display["Multiplier"].map(lambda m: f"{m:.0%}")
for column in display.columns[1:]:
    display[column] = display[column].map(fmt_compact)
st.dataframe(display, hide_index=True, use_container_width=True)

st.download_button(
    "Download Sensitivity CSV",
    data=export_sensitivity_to_csv(inputs, results),
    file_name="JusurCalc_sensitivity.csv",
    mime="text/csv",
)
