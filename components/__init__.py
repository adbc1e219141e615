"""
Components package for the Jusur calculator UI
"""
from .styles import (
    get_page_css,
    get_plotly_theme,
    apply_plotly_theme,
    metric_card,
    status_badge,
    page_header,
    IOS_BLUE,
    IOS_GREEN,
    IOS_ORANGE,
    IOS_RED,
    CHART_COLORS,
    MODEL_COLORS,
)

from .formatting import fmt_compact, fmt_money, fmt_pct, fmt_share

from .sidebar import (
    render_logo,
    render_section_header,
    render_theme_toggle,
    create_deal_inputs,
    load_into_form,
)

from .charts import (
    CHART_TYPES,
    create_pie_chart,
    create_bar_chart,
    create_multi_line_chart,
    create_grouped_bar_chart,
    create_profit_chart,
    create_roi_timeline_chart,
    create_model_comparison_chart,
    create_sensitivity_chart,
)
