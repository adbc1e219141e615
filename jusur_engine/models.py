"""
Profit-sharing model strategies
Each strategy maps a positive total profit to the managing party's share (0-1)
"""
from typing import Callable, Dict, List, Tuple

from .deal import DealInputs, SharingModel

# Sliding scale: 20% floor, +25% per 2M of profit, capped at 45%
SLIDING_FLOOR = 0.20
SLIDING_CEILING = 0.45
SLIDING_SLOPE = 0.25
SLIDING_SCALE = 2_000_000

# Progressive: marginal rates on profit chunks, (upper bound, rate)
PROGRESSIVE_TIERS: List[Tuple[float, float]] = [
    (500_000, 0.25),
    (1_000_000, 0.35),
    (float("inf"), 0.45),
]

FLAT_CAP = 0.90

ShareStrategy = Callable[[float, DealInputs, float], float]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def sliding_share(total_profit: float, inputs: DealInputs, cost_to_buy: float) -> float:
    """Linear ramp from 20% to 45% of profit"""
    return clamp(
        SLIDING_FLOOR + (total_profit / SLIDING_SCALE) * SLIDING_SLOPE,
        SLIDING_FLOOR,
        SLIDING_CEILING,
    )


def progressive_cut(total_profit: float) -> float:
    """Monetary cut with tax-style tiers applied to profit chunks"""
    cut = 0.0
    lower = 0.0
    for upper, rate in PROGRESSIVE_TIERS:
        chunk = min(max(total_profit - lower, 0), upper - lower)
        cut += chunk * rate
        lower = upper
    return cut


def progressive_share(total_profit: float, inputs: DealInputs, cost_to_buy: float) -> float:
    """Effective blended rate across the progressive tiers"""
    if total_profit <= 0:
        return 0.0
    return progressive_cut(total_profit) / total_profit


def flat_share(total_profit: float, inputs: DealInputs, cost_to_buy: float) -> float:
    return clamp(inputs.flat_pct / 100, 0.0, FLAT_CAP)


def roi_tiered_share(total_profit: float, inputs: DealInputs, cost_to_buy: float) -> float:
    """
    Pick a share by the deal's ROI against cost to buy

    Boundary ROI values fall into the lower tier. Tier ordering is not
    validated: with roi_tier2_pct < roi_tier1_pct the schedule is simply
    non-monotonic.
    """
    roi = total_profit / cost_to_buy * 100 if cost_to_buy > 0 else 0.0

    if roi <= inputs.roi_tier1_pct:
        return inputs.roi_share_pct1 / 100
    elif roi <= inputs.roi_tier2_pct:
        return inputs.roi_share_pct2 / 100
    else:
        return inputs.roi_share_pct3 / 100


STRATEGIES: Dict[SharingModel, ShareStrategy] = {
    SharingModel.SLIDING: sliding_share,
    SharingModel.PROGRESSIVE: progressive_share,
    SharingModel.FLAT: flat_share,
    SharingModel.ROI_TIERED: roi_tiered_share,
}


def calculate_share_pct(
    model: SharingModel,
    total_profit: float,
    inputs: DealInputs,
    cost_to_buy: float,
) -> float:
    """Managing party share for a model; 0 when there is no profit"""
    if total_profit <= 0:
        return 0.0
    return STRATEGIES[model](total_profit, inputs, cost_to_buy)
