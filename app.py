"""
Jusur Calc - Investment profit-sharing calculator
"""
import logging
import streamlit as st

from jusur_engine import (
    derive,
    analyze_break_even,
    build_timeline,
)
from jusur_engine.export import export_results_to_csv, export_filename, results_summary
from jusur_engine.settings import configure_logging, get_settings
from components.styles import get_page_css, page_header, metric_card
from components.formatting import fmt_compact, fmt_money, fmt_pct, fmt_share
from components.sidebar import render_logo, render_theme_toggle, create_deal_inputs, reset_form
from components.charts import CHART_TYPES, create_profit_chart, create_roi_timeline_chart

configure_logging()
logger = logging.getLogger(__name__)
settings = get_settings()

# Page config
st.set_page_config(
    page_title=settings.app_name,
    page_icon="🧮",
    layout="wide",
)

# -----------------------------------------------------------------------------
# SIDEBAR - INPUTS
# -----------------------------------------------------------------------------
render_logo()
dark = render_theme_toggle()
st.markdown(get_page_css(dark), unsafe_allow_html=True)

model, inputs = create_deal_inputs()
results = derive(model, inputs)

# Shared with the other pages
st.session_state["deal"] = {"model": model, "inputs": inputs, "results": results}

st.markdown(page_header(
    settings.app_name,
    f"Profit sharing under the {model.label} model",
), unsafe_allow_html=True)

# -----------------------------------------------------------------------------
# KEY METRICS
# -----------------------------------------------------------------------------
col1, col2, col3, col4 = st.columns(4)

with col1:
    st.markdown(metric_card("Investor ROI", fmt_pct(results.investor_roi_pct)), unsafe_allow_html=True)
with col2:
    st.markdown(metric_card("Jusur Share", fmt_share(results.share_pct)), unsafe_allow_html=True)
with col3:
    st.markdown(
        metric_card(
            "Total Profit",
            fmt_compact(results.total_profit),
            delta="Loss" if results.total_profit < 0 else None,
            delta_positive=False,
        ),
        unsafe_allow_html=True,
    )
with col4:
    st.markdown(metric_card("Your Share", fmt_compact(results.your_share)), unsafe_allow_html=True)

# Actions
action1, action2, action3, _ = st.columns([1, 1, 1, 3])
with action1:
    st.download_button(
        "Export CSV",
        data=export_results_to_csv(model, inputs, results),
        file_name=export_filename(model),
        mime="text/csv",
    )
with action2:
    if st.button("Reset"):
        reset_form()
        st.rerun()
with action3:
    with st.popover("Share Results"):
        # st.code carries a copy-to-clipboard button
        st.code(results_summary(results), language=None)

st.divider()

# -----------------------------------------------------------------------------
# CHARTS
# -----------------------------------------------------------------------------
timeline = build_timeline(inputs, results)

chart_col, roi_col = st.columns(2)
with chart_col:
    chart_type = st.radio("Chart", CHART_TYPES, horizontal=True, label_visibility="collapsed")
    st.plotly_chart(create_profit_chart(results, timeline, chart_type, dark), use_container_width=True)
with roi_col:
    st.plotly_chart(create_roi_timeline_chart(timeline, dark), use_container_width=True)

# -----------------------------------------------------------------------------
# BREAKDOWN
# -----------------------------------------------------------------------------
st.subheader("Detailed Breakdown")

breakdown = [
    ("Cost to Buy", results.cost_to_buy),
    ("Net Sale Revenue", results.net_sale_revenue),
    ("Total Profit", results.total_profit),
    ("Buy Commission", results.buy_commission_amount),
    ("Sell Commission", results.sell_commission_amount),
    ("Agent Commission", results.agent_commission_amount),
    ("Transaction Tax", results.transaction_tax_amount),
    ("Other Expenses", results.other_expenses),
    ("Jusur Profit Cut", results.profit_cut),
    ("Investor Profit", results.investor_profit),
    ("Investor Final Return", results.investor_final_return),
    ("Jusur Total Revenue", results.managing_party_revenue),
    ("Your Share", results.your_share),
    ("Partner Share", results.partner_share),
]

cols = st.columns(3)
for i, (label, value) in enumerate(breakdown):
    cols[i % 3].metric(label, fmt_money(value))

st.caption(f"Investor receives {fmt_pct(results.investor_profit_share_pct, 1)} of total profit.")

# -----------------------------------------------------------------------------
# BREAK-EVEN
# -----------------------------------------------------------------------------
st.subheader("Break-Even")

analysis = analyze_break_even(inputs)
if not analysis.achievable:
    st.error("Break-even price: not achievable (commission and tax rates reach 100% of the sale price)")
else:
    be1, be2, be3 = st.columns(3)
    be1.metric(f"Sale Price for {analysis.target_roi_pct:g}% ROI", fmt_money(analysis.price))
    be2.metric("Required Net Revenue", fmt_money(analysis.required_net_revenue))
    be3.metric(
        "Headroom vs Current Price",
        fmt_money(analysis.headroom),
        delta="On target" if analysis.meets_target else "Below target",
        delta_color="normal" if analysis.meets_target else "inverse",
    )
