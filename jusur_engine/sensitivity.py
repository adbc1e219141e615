"""
Sensitivity analysis across profit levels and sharing models
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
import numpy as np
import pandas as pd

from .breakeven import required_sell_price
from .deal import DealInputs, DealResults, SharingModel
from .derivation import derive

# 50% to 150% of the base profit in 10% steps
PROFIT_MULTIPLIERS: List[float] = [round(float(m), 2) for m in np.linspace(0.5, 1.5, 11)]


@dataclass(frozen=True)
class ModelOutcome:
    """Split of one sample's profit under one model"""
    profit_cut: float
    investor_profit: float


@dataclass(frozen=True)
class SamplePoint:
    """One point of the sweep, evaluated under every model"""
    multiplier: float
    target_profit: float
    sell_price: float
    outcomes: Dict[SharingModel, ModelOutcome]


def sample_point(inputs: DealInputs, base_profit: float, multiplier: float) -> SamplePoint:
    """Re-derive every model at the sale price producing base_profit * multiplier"""
    target_profit = base_profit * multiplier
    sell_price = required_sell_price(inputs, target_profit)
    scenario = inputs.replace(sell_price=sell_price)

    outcomes = {}
    for model in SharingModel:
        results = derive(model, scenario)
        outcomes[model] = ModelOutcome(
            profit_cut=results.profit_cut,
            investor_profit=results.investor_profit,
        )

    return SamplePoint(
        multiplier=multiplier,
        target_profit=target_profit,
        sell_price=sell_price,
        outcomes=outcomes,
    )


class SensitivitySweep:
    """
    Lazy, restartable sequence of sample points

    Points are computed on iteration; iterating again recomputes them from the
    same inputs. Empty when the base profit is not positive.
    """

    def __init__(self, inputs: DealInputs, base_profit: float, multipliers: Optional[List[float]] = None):
        self.inputs = inputs
        self.base_profit = base_profit
        self.multipliers = list(PROFIT_MULTIPLIERS if multipliers is None else multipliers)

    @property
    def is_empty(self) -> bool:
        return self.base_profit <= 0

    def __len__(self) -> int:
        return 0 if self.is_empty else len(self.multipliers)

    def __iter__(self) -> Iterator[SamplePoint]:
        if self.is_empty:
            return
        for multiplier in self.multipliers:
            yield sample_point(self.inputs, self.base_profit, multiplier)


def sensitivity(inputs: DealInputs, base_results: DealResults) -> SensitivitySweep:
    """
    Sweep profit from 50% to 150% of the current total profit

    Args:
        inputs: Deal inputs (sell_price is replaced per sample)
        base_results: Results of the current deal

    Returns:
        SensitivitySweep of 11 points, or an empty sweep for non-positive profit
    """
    return SensitivitySweep(inputs, base_results.total_profit)


def sweep_to_frame(sweep: SensitivitySweep) -> pd.DataFrame:
    """One row per sample, with cut and investor profit columns per model"""
    rows = []
    for point in sweep:
        row = {
            "Multiplier": point.multiplier,
            "Total Profit": point.target_profit,
            "Sell Price": point.sell_price,
        }
        for model, outcome in point.outcomes.items():
            row[f"{model.label} Cut"] = outcome.profit_cut
            row[f"{model.label} Investor"] = outcome.investor_profit
        rows.append(row)

    if not rows:
        return pd.DataFrame(columns=["Multiplier", "Total Profit", "Sell Price"])
    return pd.DataFrame(rows)
