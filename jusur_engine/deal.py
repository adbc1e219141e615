"""
Deal inputs and results for the Jusur profit-sharing calculator
Inputs are fully populated with defaults; results are derived fresh per call
"""
from dataclasses import dataclass, asdict, replace as dc_replace
from enum import Enum
from typing import Any, Dict
import math


class AgentCommissionMode(Enum):
    PERCENTAGE = "percentage"  # % of sale price
    FIXED_AMOUNT = "fixed_amount"  # Flat amount


class SharingModel(Enum):
    SLIDING = "SLIDING"
    PROGRESSIVE = "PROGRESSIVE"
    FLAT = "FLAT"
    ROI_TIERED = "ROI"

    @property
    def label(self) -> str:
        return MODEL_LABELS[self]


MODEL_LABELS = {
    SharingModel.SLIDING: "Sliding Scale",
    SharingModel.PROGRESSIVE: "Progressive",
    SharingModel.FLAT: "Flat Rate",
    SharingModel.ROI_TIERED: "ROI-Based",
}

_TRUE_STRINGS = {"true", "1", "yes", "y", "on"}


def to_number(value: Any) -> float:
    """Coerce a loosely-typed value to a finite float (0 when missing or invalid)"""
    if value is None or isinstance(value, bool):
        return float(value or 0)
    if isinstance(value, str):
        value = value.replace(",", "").strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def to_agent_mode(value: Any) -> AgentCommissionMode:
    if isinstance(value, AgentCommissionMode):
        return value
    try:
        return AgentCommissionMode(str(value).strip().lower())
    except ValueError:
        return AgentCommissionMode.PERCENTAGE


def to_sharing_model(value: Any, default: SharingModel = SharingModel.SLIDING) -> SharingModel:
    """Resolve a model from an enum member, its value or its name"""
    if isinstance(value, SharingModel):
        return value
    text = str(value or "").strip().upper()
    for model in SharingModel:
        if text in (model.value, model.name):
            return model
    return default


@dataclass(frozen=True)
class DealInputs:
    """All inputs for one buy/sell deal. Percentages are plain numbers (1.5 = 1.5%)"""
    # Purchase
    buy_price: float = 0.0
    buy_commission_pct: float = 0.0

    # Sale
    sell_price: float = 0.0
    sell_commission_pct: float = 0.0

    # Agent commission on the sale
    agent_commission_mode: AgentCommissionMode = AgentCommissionMode.PERCENTAGE
    agent_commission_pct: float = 0.0
    agent_commission_amount: float = 0.0

    # Transaction tax on the sale
    use_transaction_tax: bool = False
    transaction_tax_pct: float = 0.0

    other_expenses: float = 0.0  # Flat deduction from proceeds
    holding_period_months: int = 0  # Timeline reporting only
    target_roi_pct: float = 0.0  # Break-even target

    # Flat model
    flat_pct: float = 0.0

    # ROI-tiered model
    roi_tier1_pct: float = 0.0
    roi_tier2_pct: float = 0.0
    roi_share_pct1: float = 0.0
    roi_share_pct2: float = 0.0
    roi_share_pct3: float = 0.0

    @property
    def uses_agent_percentage(self) -> bool:
        return self.agent_commission_mode == AgentCommissionMode.PERCENTAGE

    def replace(self, **changes) -> "DealInputs":
        """Return a copy with the given fields changed"""
        return dc_replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize inputs to a JSON-ready dictionary"""
        data = asdict(self)
        data["agent_commission_mode"] = self.agent_commission_mode.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DealInputs":
        """
        Build inputs from form state, JSON or CSV values

        Missing, empty or unparseable numbers become 0. Unknown keys are ignored.
        """
        data = data or {}
        months = int(to_number(data.get("holding_period_months")))

        return cls(
            buy_price=to_number(data.get("buy_price")),
            buy_commission_pct=to_number(data.get("buy_commission_pct")),
            sell_price=to_number(data.get("sell_price")),
            sell_commission_pct=to_number(data.get("sell_commission_pct")),
            agent_commission_mode=to_agent_mode(data.get("agent_commission_mode")),
            agent_commission_pct=to_number(data.get("agent_commission_pct")),
            agent_commission_amount=to_number(data.get("agent_commission_amount")),
            use_transaction_tax=to_bool(data.get("use_transaction_tax", False)),
            transaction_tax_pct=to_number(data.get("transaction_tax_pct")),
            other_expenses=to_number(data.get("other_expenses")),
            holding_period_months=max(0, months),
            target_roi_pct=to_number(data.get("target_roi_pct")),
            flat_pct=to_number(data.get("flat_pct")),
            roi_tier1_pct=to_number(data.get("roi_tier1_pct")),
            roi_tier2_pct=to_number(data.get("roi_tier2_pct")),
            roi_share_pct1=to_number(data.get("roi_share_pct1")),
            roi_share_pct2=to_number(data.get("roi_share_pct2")),
            roi_share_pct3=to_number(data.get("roi_share_pct3")),
        )


@dataclass(frozen=True)
class DealResults:
    """Output of the core derivation for one model"""
    buy_commission_amount: float
    cost_to_buy: float
    sell_commission_amount: float
    agent_commission_amount: float
    transaction_tax_amount: float
    other_expenses: float
    net_sale_revenue: float
    total_profit: float
    share_pct: float  # Managing party share of profit (0-1)
    profit_cut: float
    investor_profit: float
    investor_final_return: float
    managing_party_revenue: float  # Buy commission + profit cut
    your_share: float
    partner_share: float
    investor_roi_pct: float
    investor_profit_share_pct: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DealResults":
        return cls(**{name: to_number(data.get(name)) for name in cls.__dataclass_fields__})


def create_default_inputs(
    buy_price: float = 5_600_000,
    sell_price: float = 7_200_000,
    buy_commission_pct: float = 1.0,
    sell_commission_pct: float = 1.5,
    holding_period_months: int = 12,
    target_roi_pct: float = 15.0,
    flat_pct: float = 30.0,
) -> DealInputs:
    """Factory for a typical flip used to pre-fill forms"""
    return DealInputs(
        buy_price=buy_price,
        sell_price=sell_price,
        buy_commission_pct=buy_commission_pct,
        sell_commission_pct=sell_commission_pct,
        holding_period_months=holding_period_months,
        target_roi_pct=target_roi_pct,
        flat_pct=flat_pct,
        roi_tier1_pct=10.0,
        roi_tier2_pct=20.0,
        roi_share_pct1=20.0,
        roi_share_pct2=30.0,
        roi_share_pct3=40.0,
    )
