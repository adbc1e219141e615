"""Tests for the profit-sharing strategies."""
import pytest

from jusur_engine.deal import DealInputs, SharingModel
from jusur_engine.derivation import derive
from jusur_engine.models import (
    SLIDING_CEILING,
    SLIDING_FLOOR,
    calculate_share_pct,
    progressive_cut,
    sliding_share,
)


def _share(model, total_profit, inputs=None, cost_to_buy=1_000_000):
    return calculate_share_pct(model, total_profit, inputs or DealInputs(), cost_to_buy)


class TestSliding:
    def test_floor_for_small_profit(self):
        assert _share(SharingModel.SLIDING, 1) == pytest.approx(SLIDING_FLOOR)

    def test_ramp(self):
        assert _share(SharingModel.SLIDING, 1_000_000) == pytest.approx(0.325)
        assert _share(SharingModel.SLIDING, 1_436_000) == pytest.approx(0.3795)

    def test_ceiling(self):
        assert _share(SharingModel.SLIDING, 2_000_000) == pytest.approx(SLIDING_CEILING)
        assert _share(SharingModel.SLIDING, 50_000_000) == pytest.approx(SLIDING_CEILING)

    def test_monotonic(self):
        profits = [1, 250_000, 500_000, 1_000_000, 1_500_000, 2_000_000, 3_000_000]
        shares = [sliding_share(p, DealInputs(), 1.0) for p in profits]
        assert shares == sorted(shares)
        assert all(SLIDING_FLOOR <= s <= SLIDING_CEILING for s in shares)


class TestProgressive:
    def test_first_tier_only(self):
        assert progressive_cut(400_000) == pytest.approx(100_000)
        assert _share(SharingModel.PROGRESSIVE, 400_000) == pytest.approx(0.25)

    def test_tier_boundaries(self):
        assert progressive_cut(500_000) == pytest.approx(125_000)
        assert progressive_cut(1_000_000) == pytest.approx(300_000)

    def test_spans_all_tiers(self):
        assert progressive_cut(1_500_000) == pytest.approx(525_000)
        assert _share(SharingModel.PROGRESSIVE, 1_500_000) == pytest.approx(0.35)

    def test_cut_through_derivation(self):
        inputs = DealInputs(buy_price=1_000_000, sell_price=2_500_000)
        results = derive(SharingModel.PROGRESSIVE, inputs)

        assert results.total_profit == pytest.approx(1_500_000)
        assert results.profit_cut == pytest.approx(525_000)
        assert results.investor_profit == pytest.approx(975_000)

    def test_non_positive_profit(self):
        assert progressive_cut(0) == 0
        assert progressive_cut(-10_000) == 0


class TestFlat:
    @pytest.mark.parametrize("flat_pct, expected", [
        (30.0, 0.30),
        (0.0, 0.0),
        (-10.0, 0.0),
        (90.0, 0.90),
        (95.0, 0.90),
    ])
    def test_clamped(self, flat_pct, expected):
        inputs = DealInputs(flat_pct=flat_pct)
        assert _share(SharingModel.FLAT, 100_000, inputs) == pytest.approx(expected)

    def test_independent_of_profit(self):
        inputs = DealInputs(flat_pct=25.0)
        assert _share(SharingModel.FLAT, 10, inputs) == _share(SharingModel.FLAT, 10_000_000, inputs)


class TestRoiTiered:
    @pytest.fixture
    def tiers(self):
        return DealInputs(
            roi_tier1_pct=25.0,
            roi_tier2_pct=50.0,
            roi_share_pct1=20.0,
            roi_share_pct2=30.0,
            roi_share_pct3=40.0,
        )

    def test_lower_tier(self, tiers):
        assert _share(SharingModel.ROI_TIERED, 100_000, tiers) == pytest.approx(0.20)

    def test_boundary_belongs_to_lower_tier(self, tiers):
        assert _share(SharingModel.ROI_TIERED, 250_000, tiers) == pytest.approx(0.20)
        assert _share(SharingModel.ROI_TIERED, 500_000, tiers) == pytest.approx(0.30)

    def test_middle_and_top_tiers(self, tiers):
        assert _share(SharingModel.ROI_TIERED, 375_000, tiers) == pytest.approx(0.30)
        assert _share(SharingModel.ROI_TIERED, 750_000, tiers) == pytest.approx(0.40)

    def test_zero_cost_uses_lowest_tier(self, tiers):
        assert _share(SharingModel.ROI_TIERED, 750_000, tiers, cost_to_buy=0) == pytest.approx(0.20)

    def test_inverted_tiers_are_accepted(self):
        inputs = DealInputs(
            roi_tier1_pct=50.0,
            roi_tier2_pct=25.0,
            roi_share_pct1=40.0,
            roi_share_pct2=30.0,
            roi_share_pct3=10.0,
        )
        # Every ROI up to tier 1 takes share 1; the middle tier is unreachable
        assert _share(SharingModel.ROI_TIERED, 375_000, inputs) == pytest.approx(0.40)
        assert _share(SharingModel.ROI_TIERED, 750_000, inputs) == pytest.approx(0.10)


@pytest.mark.parametrize("model", list(SharingModel))
@pytest.mark.parametrize("profit", [0, -1, -1_000_000])
def test_no_share_without_profit(model, profit):
    inputs = DealInputs(flat_pct=50.0, roi_share_pct1=20.0)
    assert _share(model, profit, inputs) == 0


@pytest.mark.parametrize("model", list(SharingModel))
def test_share_within_unit_interval(model):
    inputs = DealInputs(
        flat_pct=30.0,
        roi_tier1_pct=10.0,
        roi_tier2_pct=20.0,
        roi_share_pct1=20.0,
        roi_share_pct2=30.0,
        roi_share_pct3=40.0,
    )
    for profit in [1, 100_000, 1_000_000, 10_000_000]:
        assert 0 <= _share(model, profit, inputs) <= 1
