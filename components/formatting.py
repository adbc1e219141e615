"""
Display formatting for amounts and percentages
Non-finite values render as N/A
"""
import math
from typing import Optional

from jusur_engine.settings import get_settings


def _currency() -> str:
    return get_settings().currency_label


def fmt_compact(value: float, currency: Optional[str] = None) -> str:
    """EGP 1.4M / EGP 545K / EGP 950"""
    if value is None or not math.isfinite(value):
        return "N/A"
    currency = currency or _currency()
    if abs(value) >= 1_000_000:
        return f"{currency} {value / 1_000_000:.1f}M"
    elif abs(value) >= 1_000:
        return f"{currency} {value / 1_000:.0f}K"
    return f"{currency} {value:,.0f}"


def fmt_money(value: float, currency: Optional[str] = None) -> str:
    """Full amount with thousands separators"""
    if value is None or not math.isfinite(value):
        return "N/A"
    return f"{currency or _currency()} {value:,.0f}"


def fmt_pct(value: float, decimals: int = 2) -> str:
    """Format a plain percentage number (15.7 -> '15.70%')"""
    if value is None or not math.isfinite(value):
        return "N/A"
    return f"{value:.{decimals}f}%"


def fmt_share(value: float, decimals: int = 2) -> str:
    """Format a 0-1 share as a percentage"""
    if value is None or not math.isfinite(value):
        return "N/A"
    return f"{value:.{decimals}%}"
