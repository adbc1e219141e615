"""Tests for the core deal derivation."""
import math

import pytest

from jusur_engine.deal import AgentCommissionMode, DealInputs, SharingModel
from jusur_engine.derivation import acquisition_cost, derive, derive_all, net_sale_revenue


def test_flip_example_under_sliding(flip_inputs):
    results = derive(SharingModel.SLIDING, flip_inputs)

    assert results.buy_commission_amount == pytest.approx(56_000)
    assert results.cost_to_buy == pytest.approx(5_656_000)
    assert results.sell_commission_amount == pytest.approx(108_000)
    assert results.net_sale_revenue == pytest.approx(7_092_000)
    assert results.total_profit == pytest.approx(1_436_000)
    assert results.share_pct == pytest.approx(0.3795)
    assert results.profit_cut == pytest.approx(544_962)
    assert results.investor_profit == pytest.approx(891_038)
    assert results.investor_roi_pct == pytest.approx(15.754, abs=0.01)


def test_party_shares(flip_inputs):
    results = derive(SharingModel.SLIDING, flip_inputs)

    assert results.investor_final_return == pytest.approx(results.cost_to_buy + results.investor_profit)
    assert results.managing_party_revenue == pytest.approx(56_000 + results.profit_cut)
    assert results.your_share == results.partner_share
    assert results.your_share + results.partner_share == pytest.approx(results.managing_party_revenue)
    assert results.investor_profit_share_pct == pytest.approx(100 * (1 - 0.3795))


@pytest.mark.parametrize("model", list(SharingModel))
def test_loss_gives_no_cut(model, loss_inputs):
    results = derive(model, loss_inputs)

    assert results.total_profit < 0
    assert results.share_pct == 0
    assert results.profit_cut == 0
    assert results.investor_profit == 0
    assert results.investor_roi_pct <= 0
    assert results.investor_profit_share_pct == 0
    assert results.investor_final_return == pytest.approx(results.cost_to_buy)


def test_zero_profit_gives_no_cut():
    inputs = DealInputs(buy_price=1_000_000, sell_price=1_000_000)
    results = derive(SharingModel.PROGRESSIVE, inputs)

    assert results.total_profit == 0
    assert results.share_pct == 0
    assert results.profit_cut == 0


@pytest.mark.parametrize("model", list(SharingModel))
def test_empty_inputs_are_all_zero(model):
    results = derive(model, DealInputs())

    for value in results.to_dict().values():
        assert value == 0
        assert math.isfinite(value)


def test_all_deductions(loaded_inputs):
    results = derive(SharingModel.FLAT, loaded_inputs)

    assert results.sell_commission_amount == pytest.approx(60_000)
    assert results.agent_commission_amount == pytest.approx(80_000)
    assert results.transaction_tax_amount == pytest.approx(100_000)
    assert results.other_expenses == 50_000
    assert results.net_sale_revenue == pytest.approx(4_000_000 - 60_000 - 80_000 - 100_000 - 50_000)
    assert results.total_profit == pytest.approx(3_710_000 - 3_030_000)
    assert results.share_pct == pytest.approx(0.30)


def test_fixed_agent_commission_is_verbatim(flip_inputs):
    inputs = flip_inputs.replace(
        agent_commission_mode=AgentCommissionMode.FIXED_AMOUNT,
        agent_commission_pct=50.0,
        agent_commission_amount=75_000,
    )
    results = derive(SharingModel.SLIDING, inputs)

    assert results.agent_commission_amount == 75_000
    assert results.net_sale_revenue == pytest.approx(7_092_000 - 75_000)


def test_transaction_tax_ignored_when_disabled(flip_inputs):
    inputs = flip_inputs.replace(use_transaction_tax=False, transaction_tax_pct=2.5)

    assert derive(SharingModel.SLIDING, inputs).transaction_tax_amount == 0


def test_zero_cost_guards_roi():
    inputs = DealInputs(buy_price=0, sell_price=500_000)
    results = derive(SharingModel.SLIDING, inputs)

    assert results.total_profit == 500_000
    assert results.investor_roi_pct == 0
    assert results.investor_profit_share_pct == pytest.approx(100 * (1 - results.share_pct))


def test_derive_is_idempotent(loaded_inputs):
    for model in SharingModel:
        assert derive(model, loaded_inputs) == derive(model, loaded_inputs)


def test_derive_all_covers_every_model(flip_inputs):
    all_results = derive_all(flip_inputs)

    assert list(all_results) == list(SharingModel)
    assert all_results[SharingModel.SLIDING] == derive(SharingModel.SLIDING, flip_inputs)


def test_helpers_match_derivation(loaded_inputs):
    results = derive(SharingModel.SLIDING, loaded_inputs)

    assert acquisition_cost(loaded_inputs) == pytest.approx(results.cost_to_buy)
    assert net_sale_revenue(loaded_inputs) == pytest.approx(results.net_sale_revenue)
