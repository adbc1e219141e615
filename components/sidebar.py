"""
Sidebar components: logo, theme toggle and deal input form
"""
import streamlit as st
from typing import Optional, Tuple

from jusur_engine.deal import (
    AgentCommissionMode,
    DealInputs,
    SharingModel,
    create_default_inputs,
)
from jusur_engine.settings import get_settings
from components.styles import IOS_BLUE, IOS_GRAY

# Widget keys are prefixed so saved inputs can be pushed back into the form
KEY_PREFIX = "inp_"
MODEL_KEY = "inp_model"
# Last known form values; survives runs where a widget is not rendered
FORM_KEY = "deal_form"


def render_logo():
    """Render the app name in sidebar"""
    settings = get_settings()
    st.sidebar.markdown(
        f"""<div style="padding: 0.5rem 0;">
<span style="font-size: 1.3rem; font-weight: 700; color: {IOS_BLUE};">{settings.app_name}</span><br>
<span style="font-size: 0.8rem; color: {IOS_GRAY};">Investment Calculator</span>
</div>""",
        unsafe_allow_html=True,
    )


def render_section_header(title: str):
    """Render a styled section header in sidebar"""
    st.sidebar.markdown(
        f"""<div style="color: {IOS_GRAY}; font-size: 0.75rem; font-weight: 600;
text-transform: uppercase; letter-spacing: 0.08em; margin: 1.2rem 0 0.4rem 0;">{title}</div>""",
        unsafe_allow_html=True,
    )


def render_theme_toggle() -> bool:
    """Dark mode switch; returns True when dark mode is on"""
    # Widget state is dropped on pages without the toggle; "dark" survives
    if "dark_mode" not in st.session_state:
        st.session_state["dark_mode"] = st.session_state.get("dark", False)
    dark = st.sidebar.toggle("Dark mode", key="dark_mode")
    st.session_state["dark"] = dark
    return dark


def init_form_state():
    """
    Restore widget state at the start of each run

    Streamlit drops the state of widgets that were not rendered on the last
    run (other pages, or the parameters of a model that is not selected), so
    the form values live under FORM_KEY and are pushed back into any missing
    widget key here.
    """
    if FORM_KEY not in st.session_state:
        deal = st.session_state.get("deal")
        if deal:
            load_into_form(deal["model"], deal["inputs"])
        else:
            load_into_form(get_settings().default_model, create_default_inputs())
        return

    for key, value in st.session_state[FORM_KEY].items():
        if key not in st.session_state:
            st.session_state[key] = value


def load_into_form(model: SharingModel, inputs: DealInputs):
    """Push a model and inputs into the sidebar widgets (takes effect on rerun)"""
    values = {MODEL_KEY: model}
    for name, value in inputs.to_dict().items():
        if name == "agent_commission_mode":
            value = AgentCommissionMode(value)
        values[f"{KEY_PREFIX}{name}"] = value

    st.session_state[FORM_KEY] = values
    for key, value in values.items():
        st.session_state[key] = value


def reset_form():
    """Forget the form values; the next run seeds defaults"""
    for key in [k for k in st.session_state if k.startswith(KEY_PREFIX)]:
        del st.session_state[key]
    st.session_state.pop(FORM_KEY, None)
    st.session_state.pop("deal", None)


def _money(label: str, name: str, help: Optional[str] = None) -> float:
    return st.sidebar.number_input(
        label, min_value=0.0, step=50_000.0, format="%.0f", key=f"{KEY_PREFIX}{name}", help=help,
    )


def _pct(label: str, name: str, help: Optional[str] = None, min_value: Optional[float] = None) -> float:
    return st.sidebar.number_input(
        label, min_value=min_value, step=0.5, format="%.2f", key=f"{KEY_PREFIX}{name}", help=help,
    )


def create_deal_inputs() -> Tuple[SharingModel, DealInputs]:
    """
    Create deal input widgets in sidebar

    Returns:
        (selected model, DealInputs)
    """
    init_form_state()
    settings = get_settings()

    render_section_header("Calculation Model")
    model = st.sidebar.selectbox(
        "Sharing Model",
        options=list(SharingModel),
        format_func=lambda m: m.label,
        key=MODEL_KEY,
    )

    if model == SharingModel.FLAT:
        _pct("Flat % for Jusur", "flat_pct", help="Capped at 90%")
    elif model == SharingModel.ROI_TIERED:
        col1, col2 = st.sidebar.columns(2)
        with col1:
            st.number_input("ROI Tier 1 (%)", step=1.0, key=f"{KEY_PREFIX}roi_tier1_pct")
        with col2:
            st.number_input("ROI Tier 2 (%)", step=1.0, key=f"{KEY_PREFIX}roi_tier2_pct")
        _pct("Jusur % ≤ Tier 1", "roi_share_pct1")
        _pct("Jusur % within Tier 2", "roi_share_pct2")
        _pct("Jusur % above Tier 2", "roi_share_pct3")

    render_section_header("Purchase")
    _money("Buy Price", "buy_price")
    _pct("Buy Commission (%)", "buy_commission_pct", min_value=0.0)

    render_section_header("Sale")
    _money("Sell Price", "sell_price")
    _pct("Sell Commission (%)", "sell_commission_pct", min_value=0.0)

    mode = st.sidebar.radio(
        "Agent Commission",
        options=list(AgentCommissionMode),
        format_func=lambda m: "Percentage" if m == AgentCommissionMode.PERCENTAGE else "Fixed Amount",
        horizontal=True,
        key=f"{KEY_PREFIX}agent_commission_mode",
    )
    if mode == AgentCommissionMode.PERCENTAGE:
        _pct("Agent Commission (%)", "agent_commission_pct", help="Percentage of total sale price", min_value=0.0)
    else:
        _money("Agent Commission Amount", "agent_commission_amount", help="Fixed commission amount")

    use_tax = st.sidebar.checkbox("Apply Transaction Tax", key=f"{KEY_PREFIX}use_transaction_tax")
    tax_key = f"{KEY_PREFIX}transaction_tax_pct"
    if use_tax:
        if not st.session_state.get(tax_key):
            st.session_state[tax_key] = settings.default_transaction_tax_pct
        _pct("Transaction Tax (%)", "transaction_tax_pct", min_value=0.0)

    _money("Other Expenses", "other_expenses")

    render_section_header("Timeline & Targets")
    st.sidebar.number_input(
        "Holding Period (months)", min_value=0, step=1, key=f"{KEY_PREFIX}holding_period_months",
    )
    _pct("Target ROI (%)", "target_roi_pct")

    form = st.session_state[FORM_KEY]
    for key in list(form):
        if key in st.session_state:
            form[key] = st.session_state[key]

    form_values = {
        key[len(KEY_PREFIX):]: value
        for key, value in form.items()
        if key != MODEL_KEY
    }
    return model, DealInputs.from_dict(form_values)
