"""
Core derivation: costs, net proceeds, profit and the investor/manager split
"""
from typing import Dict, Optional

from .deal import DealInputs, DealResults, SharingModel
from .models import calculate_share_pct


def buy_commission(inputs: DealInputs) -> float:
    return inputs.buy_price * inputs.buy_commission_pct / 100


def acquisition_cost(inputs: DealInputs) -> float:
    """Purchase price plus buy-side commission"""
    return inputs.buy_price + buy_commission(inputs)


def sale_deductions(inputs: DealInputs, sell_price: float) -> Dict[str, float]:
    """Selling-side deductions for a given sale price"""
    sell_commission = sell_price * inputs.sell_commission_pct / 100

    if inputs.uses_agent_percentage:
        agent_commission = sell_price * inputs.agent_commission_pct / 100
    else:
        agent_commission = inputs.agent_commission_amount

    if inputs.use_transaction_tax:
        transaction_tax = sell_price * inputs.transaction_tax_pct / 100
    else:
        transaction_tax = 0.0

    return {
        "sell_commission": sell_commission,
        "agent_commission": agent_commission,
        "transaction_tax": transaction_tax,
        "other_expenses": inputs.other_expenses,
    }


def net_sale_revenue(inputs: DealInputs, sell_price: Optional[float] = None) -> float:
    """Sale price minus commission, agent fee, tax and other expenses"""
    if sell_price is None:
        sell_price = inputs.sell_price
    return sell_price - sum(sale_deductions(inputs, sell_price).values())


def derive(model: SharingModel, inputs: DealInputs) -> DealResults:
    """
    Derive the full deal results under one sharing model

    Pure and total: every ratio with a possibly-zero denominator falls back to 0.

    Args:
        model: Sharing model used to pick the managing party's share
        inputs: Deal inputs

    Returns:
        DealResults
    """
    buy_commission_amount = buy_commission(inputs)
    cost_to_buy = inputs.buy_price + buy_commission_amount

    deductions = sale_deductions(inputs, inputs.sell_price)
    revenue = inputs.sell_price - sum(deductions.values())
    total_profit = revenue - cost_to_buy

    share_pct = calculate_share_pct(model, total_profit, inputs, cost_to_buy)

    profit_cut = max(0.0, total_profit * share_pct)
    investor_profit = max(0.0, total_profit - profit_cut)
    managing_party_revenue = buy_commission_amount + profit_cut

    return DealResults(
        buy_commission_amount=buy_commission_amount,
        cost_to_buy=cost_to_buy,
        sell_commission_amount=deductions["sell_commission"],
        agent_commission_amount=deductions["agent_commission"],
        transaction_tax_amount=deductions["transaction_tax"],
        other_expenses=deductions["other_expenses"],
        net_sale_revenue=revenue,
        total_profit=total_profit,
        share_pct=share_pct,
        profit_cut=profit_cut,
        investor_profit=investor_profit,
        investor_final_return=cost_to_buy + investor_profit,
        managing_party_revenue=managing_party_revenue,
        your_share=managing_party_revenue / 2,
        partner_share=managing_party_revenue / 2,
        investor_roi_pct=investor_profit / cost_to_buy * 100 if cost_to_buy > 0 else 0.0,
        investor_profit_share_pct=investor_profit / total_profit * 100 if total_profit > 0 else 0.0,
    )


def derive_all(inputs: DealInputs) -> Dict[SharingModel, DealResults]:
    """Derive results for every sharing model on the same inputs"""
    return {model: derive(model, inputs) for model in SharingModel}
