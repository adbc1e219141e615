"""
Holding-period timeline for reporting
Linear interpolation of ROI and profit from month 0 to the end of the hold
"""
from dataclasses import dataclass
from typing import List
import pandas as pd

from .deal import DealInputs, DealResults


@dataclass(frozen=True)
class TimelinePoint:
    month: int
    roi_pct: float
    profit: float


def build_timeline(inputs: DealInputs, results: DealResults) -> List[TimelinePoint]:
    """Months 0..max(1, holding_period_months); month 0 is always zero"""
    months = max(1, inputs.holding_period_months)

    return [
        TimelinePoint(
            month=month,
            roi_pct=results.investor_roi_pct * month / months,
            profit=results.total_profit * month / months,
        )
        for month in range(months + 1)
    ]


def timeline_to_frame(points: List[TimelinePoint]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Month": [p.month for p in points],
            "ROI %": [p.roi_pct for p in points],
            "Profit": [p.profit for p in points],
        }
    )
