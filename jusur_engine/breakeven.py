"""
Break-even sale price solver
Inverts the net sale revenue formula; independent of the sharing model
"""
from dataclasses import dataclass
import logging
import math

from .deal import DealInputs
from .derivation import acquisition_cost

logger = logging.getLogger(__name__)


def variable_sale_rate(inputs: DealInputs) -> float:
    """Share of the sale price lost to commission, agent fee and tax"""
    sell_rate = inputs.sell_commission_pct / 100
    agent_rate = inputs.agent_commission_pct / 100 if inputs.uses_agent_percentage else 0.0
    tax_rate = inputs.transaction_tax_pct / 100 if inputs.use_transaction_tax else 0.0
    return sell_rate + agent_rate + tax_rate


def fixed_sale_costs(inputs: DealInputs) -> float:
    """Flat deductions from the sale proceeds"""
    fixed_agent = 0.0 if inputs.uses_agent_percentage else inputs.agent_commission_amount
    return fixed_agent + inputs.other_expenses


def required_sell_price(inputs: DealInputs, target_profit: float) -> float:
    """
    Sale price at which total profit equals target_profit

    Returns math.inf when commission and tax rates sum to 100% or more,
    since no sale price can then recover the costs.
    """
    denominator = 1 - variable_sale_rate(inputs)
    if denominator <= 0:
        logger.debug("No break-even price: variable sale rate %.4f >= 1", 1 - denominator)
        return math.inf

    required_net_revenue = acquisition_cost(inputs) + target_profit
    price = (required_net_revenue + fixed_sale_costs(inputs)) / denominator
    return max(0.0, price)


def break_even(inputs: DealInputs) -> float:
    """Minimum sale price achieving inputs.target_roi_pct on the cost to buy"""
    target_profit = acquisition_cost(inputs) * (inputs.target_roi_pct / 100)
    return required_sell_price(inputs, target_profit)


def is_achievable(price: float) -> bool:
    """False for non-finite or negative solver output"""
    return math.isfinite(price) and price >= 0


@dataclass
class BreakEvenResult:
    """Break-even analysis for reporting"""
    target_roi_pct: float
    price: float
    achievable: bool
    required_net_revenue: float
    headroom: float  # Current sale price minus break-even price

    @property
    def meets_target(self) -> bool:
        return self.achievable and self.headroom >= 0


def analyze_break_even(inputs: DealInputs) -> BreakEvenResult:
    """Bundle the break-even price with achievability and headroom"""
    cost = acquisition_cost(inputs)
    price = break_even(inputs)
    achievable = is_achievable(price)

    return BreakEvenResult(
        target_roi_pct=inputs.target_roi_pct,
        price=price,
        achievable=achievable,
        required_net_revenue=cost * (1 + inputs.target_roi_pct / 100),
        headroom=inputs.sell_price - price if achievable else -math.inf,
    )
