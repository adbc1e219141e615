"""
iOS-styled CSS and color constants for the Jusur calculator
Light and dark variants; the sidebar toggle picks one per session
"""
from typing import Optional


# =============================================================================
# COLOR PALETTE
# =============================================================================

# Accents
IOS_BLUE = "#007AFF"
IOS_LIGHT_BLUE = "#5AC8FA"
IOS_GREEN = "#34C759"
IOS_ORANGE = "#FF9500"
IOS_RED = "#FF3B30"
IOS_PURPLE = "#AF52DE"
IOS_GRAY = "#8E8E93"

# Backgrounds
LIGHT_BG = "#F2F2F7"
LIGHT_CARD = "#FFFFFF"
DARK_BG = "#1C1C1E"
DARK_CARD = "#2C2C2E"

# Text
TEXT_LIGHT_PRIMARY = "#111111"
TEXT_DARK_PRIMARY = "#FFFFFF"

# Default plotly colorway
CHART_COLORS = [IOS_BLUE, IOS_LIGHT_BLUE, IOS_GREEN, IOS_ORANGE, IOS_RED]

# Party Colors
PARTY_COLORS = {
    "investor": IOS_GREEN,
    "jusur": IOS_BLUE,
    "total": IOS_ORANGE,
}

# One color per sharing model, keyed by SharingModel.value
MODEL_COLORS = {
    "SLIDING": IOS_BLUE,
    "PROGRESSIVE": IOS_ORANGE,
    "FLAT": IOS_PURPLE,
    "ROI": IOS_GREEN,
}


def _palette(dark: bool) -> dict:
    if dark:
        return {"bg": DARK_BG, "card": DARK_CARD, "text": TEXT_DARK_PRIMARY, "border": "rgba(255, 255, 255, 0.1)"}
    return {"bg": LIGHT_BG, "card": LIGHT_CARD, "text": TEXT_LIGHT_PRIMARY, "border": "rgba(0, 0, 0, 0.08)"}


# =============================================================================
# PAGE CSS
# =============================================================================

def get_page_css(dark: bool = False) -> str:
    """Returns the main CSS for the calculator pages"""
    p = _palette(dark)
    return f"""
    <style>
    /* page */
    .stApp {{
        background: {p["bg"]};
        color: {p["text"]};
        font-family: -apple-system, BlinkMacSystemFont, "SF Pro Text", sans-serif;
    }}

    /* titles */
    .jc-title {{
        font-size: 2.2rem;
        font-weight: 700;
        color: {p["text"]};
        margin-bottom: 0.25rem;
    }}

    .jc-subtitle {{
        color: {IOS_GRAY};
        font-size: 1rem;
        margin-bottom: 1.5rem;
    }}

    /* deal cards */
    .deal-card {{
        background: {p["card"]};
        border: 1px solid {p["border"]};
        border-radius: 16px;
        padding: 1.25rem;
        margin-bottom: 1rem;
        box-shadow: 0 4px 16px rgba(0, 0, 0, 0.06);
    }}

    .deal-card-value {{
        font-size: 1.8rem;
        font-weight: 700;
        color: {IOS_BLUE};
        margin: 0;
    }}

    .deal-card-label {{
        font-size: 0.8rem;
        color: {IOS_GRAY};
        text-transform: uppercase;
        letter-spacing: 0.05em;
        margin-bottom: 0.3rem;
    }}

    .deal-card-note {{
        font-size: 0.85rem;
        margin-top: 0.3rem;
    }}

    .deal-card-note.positive {{
        color: {IOS_GREEN};
    }}

    .deal-card-note.negative {{
        color: {IOS_RED};
    }}

    /* model badges */
    .model-badge {{
        display: inline-block;
        padding: 0.2rem 0.7rem;
        border-radius: 20px;
        font-size: 0.75rem;
        font-weight: 600;
    }}

    .badge-current {{
        background: {IOS_BLUE};
        color: #FFFFFF;
    }}

    .badge-success {{
        background: rgba(52, 199, 89, 0.15);
        color: {IOS_GREEN};
    }}

    .badge-error {{
        background: rgba(255, 59, 48, 0.15);
        color: {IOS_RED};
    }}

    /* pill buttons */
    .stButton > button, .stDownloadButton > button {{
        border-radius: 999px !important;
        font-weight: 600 !important;
    }}

    /* sidebar */
    section[data-testid="stSidebar"] {{
        background: {p["card"]} !important;
        border-right: 1px solid {p["border"]};
    }}

    /* no streamlit chrome */
    #MainMenu {{visibility: hidden;}}
    footer {{visibility: hidden;}}
    </style>
    """


def get_plotly_theme(dark: bool = False) -> dict:
    """Returns Plotly layout defaults for the light or dark theme"""
    p = _palette(dark)
    return {
        "template": "plotly_dark" if dark else "plotly_white",
        "paper_bgcolor": "rgba(0,0,0,0)",
        "plot_bgcolor": "rgba(0,0,0,0)",
        "font": {
            "family": "-apple-system, BlinkMacSystemFont, sans-serif",
            "color": p["text"],
        },
        "xaxis": {"gridcolor": p["border"]},
        "yaxis": {"gridcolor": p["border"]},
        "colorway": CHART_COLORS,
    }


def apply_plotly_theme(fig, dark: bool = False):
    """Apply the calculator theme to a Plotly figure"""
    fig.update_layout(**get_plotly_theme(dark))
    return fig


def metric_card(label: str, value: str, delta: Optional[str] = None, delta_positive: bool = True) -> str:
    """Card with an uppercase label, a large value and an optional note"""
    delta_html = ""
    if delta:
        delta_class = "positive" if delta_positive else "negative"
        delta_html = f'<div class="deal-card-note {delta_class}">{delta}</div>'

    return f"""
    <div class="deal-card">
        <div class="deal-card-label">{label}</div>
        <div class="deal-card-value">{value}</div>
        {delta_html}
    </div>
    """


def status_badge(text: str, status: str = "success") -> str:
    """Pill badge; status is current, success or error"""
    return f'<span class="model-badge badge-{status}">{text}</span>'


# =============================================================================
# HTML SNIPPETS
# =============================================================================

def page_header(title: str, subtitle: Optional[str] = None) -> str:
    """Title plus optional subtitle"""
    subtitle_html = f'<p class="jc-subtitle">{subtitle}</p>' if subtitle else ""
    return f"""
    <h1 class="jc-title">{title}</h1>
    {subtitle_html}
    """
