"""Shared fixtures for the Jusur engine tests."""
import pytest

from jusur_engine.deal import AgentCommissionMode, DealInputs


@pytest.fixture
def flip_inputs():
    """5.6M buy / 7.2M sell flip with brokerage on both sides only."""
    return DealInputs(
        buy_price=5_600_000,
        buy_commission_pct=1.0,
        sell_price=7_200_000,
        sell_commission_pct=1.5,
    )


@pytest.fixture
def loss_inputs():
    """Sale below cost."""
    return DealInputs(
        buy_price=2_000_000,
        buy_commission_pct=2.0,
        sell_price=1_800_000,
        sell_commission_pct=1.0,
    )


@pytest.fixture
def loaded_inputs():
    """Every deduction in play: commissions, agent %, tax and other expenses."""
    return DealInputs(
        buy_price=3_000_000,
        buy_commission_pct=1.0,
        sell_price=4_000_000,
        sell_commission_pct=1.5,
        agent_commission_mode=AgentCommissionMode.PERCENTAGE,
        agent_commission_pct=2.0,
        use_transaction_tax=True,
        transaction_tax_pct=2.5,
        other_expenses=50_000,
        holding_period_months=12,
        target_roi_pct=15.0,
        flat_pct=30.0,
        roi_tier1_pct=10.0,
        roi_tier2_pct=20.0,
        roi_share_pct1=20.0,
        roi_share_pct2=30.0,
        roi_share_pct3=40.0,
    )
