"""
Model Comparison Page - every sharing model on the current inputs
"""
import streamlit as st
import pandas as pd

from components.styles import get_page_css, page_header, status_badge
from components.formatting import fmt_compact, fmt_pct, fmt_share
from components.sidebar import render_logo, load_into_form
from components.charts import create_model_comparison_chart
from jusur_engine.scenarios import compare_models, best_model_for_investor, best_model_for_manager
from jusur_engine.export import export_comparison_to_csv

# Page config
st.set_page_config(
    page_title="Model Comparison | Jusur Calc",
    page_icon="⚖️",
    layout="wide",
)

dark = st.session_state.get("dark", False)
st.markdown(get_page_css(dark), unsafe_allow_html=True)
render_logo()

# Check if deal is configured
if "deal" not in st.session_state:
    st.warning("⚠️ No deal configured. Please enter your deal in the Calculator first.")
    st.page_link("app.py", label="→ Go to Calculator")
    st.stop()

deal = st.session_state["deal"]
model, inputs = deal["model"], deal["inputs"]

st.markdown(page_header(
    "Model Comparison",
    "Compare all calculation models with your current inputs",
), unsafe_allow_html=True)

comparisons = compare_models(inputs, model)

cols = st.columns(len(comparisons))
for col, c in zip(cols, comparisons):
    with col:
        badge = status_badge("Current", "current") if c.is_current else ""
        st.markdown(f"#### {c.label} {badge}", unsafe_allow_html=True)
        st.metric("Total Profit", fmt_compact(c.results.total_profit))
        st.metric("Jusur %", fmt_share(c.results.share_pct, 1))
        st.metric("Investor Profit", fmt_compact(c.results.investor_profit))
        st.metric("Investor ROI", fmt_pct(c.results.investor_roi_pct))
        st.metric("Your Share", fmt_compact(c.results.your_share))

        if st.button(
            "Current Model" if c.is_current else "Switch to This Model",
            key=f"switch_{c.model.value}",
            disabled=c.is_current,
            use_container_width=True,
        ):
            load_into_form(c.model, inputs)
            st.session_state["deal"] = {**deal, "model": c.model}
            st.switch_page("app.py")

st.divider()

st.plotly_chart(create_model_comparison_chart(comparisons, dark), use_container_width=True)

if comparisons[0].results.total_profit > 0:
    investor_best = best_model_for_investor(comparisons)
    manager_best = best_model_for_manager(comparisons)
    st.info(
        f"Best for the investor: **{investor_best.label}** · "
        f"Largest Jusur cut: **{manager_best.label}**"
    )

table = pd.DataFrame([
    {
        "Model": c.label,
        "Jusur %": fmt_share(c.results.share_pct),
        "Jusur Profit Cut": fmt_compact(c.results.profit_cut),
        "Investor Profit": fmt_compact(c.results.investor_profit),
        "Investor ROI": fmt_pct(c.results.investor_roi_pct),
        "Jusur Total Revenue": fmt_compact(c.results.managing_party_revenue),
    }
    for c in comparisons
])
st.dataframe(table, hide_index=True, use_container_width=True)

st.download_button(
    "Download Comparison CSV",
    data=export_comparison_to_csv(inputs, model),
    file_name="JusurCalc_comparison.csv",
    mime="text/csv",
)
