"""Tests for the Streamlit pages: form state and saved-record loading."""
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from components import storage
from jusur_engine.deal import SharingModel
from jusur_engine.derivation import derive
from jusur_engine.persistence import (
    DealRepository,
    InMemoryStore,
    ProfileRepository,
    SnapshotNotFoundError,
)

ROOT = Path(__file__).resolve().parents[1]
APP_PATH = str(ROOT / "app.py")
SAVED_DEALS_PATH = str(ROOT / "pages" / "3_Saved_Deals.py")
MODELS = list(SharingModel)


@pytest.fixture
def app():
    return AppTest.from_file(APP_PATH, default_timeout=30).run()


def _select_model(app, model):
    app.selectbox(key="inp_model").select_index(MODELS.index(model)).run()


def test_first_run_uses_defaults(app):
    assert not app.exception
    deal = app.session_state["deal"]
    assert deal["inputs"].buy_price == 5_600_000
    assert deal["results"].total_profit == pytest.approx(1_436_000)


def test_hidden_model_parameters_survive_reruns(app):
    _select_model(app, SharingModel.FLAT)
    app.number_input(key="inp_flat_pct").set_value(50.0).run()

    _select_model(app, SharingModel.SLIDING)
    app.number_input(key="inp_sell_price").set_value(8_000_000.0).run()
    app.number_input(key="inp_buy_price").set_value(5_500_000.0).run()

    assert not app.exception
    inputs = app.session_state["deal"]["inputs"]
    assert inputs.flat_pct == 50.0
    assert inputs.sell_price == 8_000_000

    _select_model(app, SharingModel.FLAT)
    assert app.number_input(key="inp_flat_pct").value == 50.0
    assert app.session_state["deal"]["results"].share_pct == pytest.approx(0.50)


def test_roi_tiers_survive_model_switch(app):
    _select_model(app, SharingModel.ROI_TIERED)
    app.number_input(key="inp_roi_share_pct3").set_value(55.0).run()

    _select_model(app, SharingModel.PROGRESSIVE)
    app.number_input(key="inp_other_expenses").set_value(10_000.0).run()

    assert app.session_state["deal"]["inputs"].roi_share_pct3 == 55.0


class _VanishingDeals(DealRepository):
    """Listed records are gone by the time they are loaded"""

    def get(self, record_id):
        raise SnapshotNotFoundError(record_id)


class _VanishingProfiles(ProfileRepository):
    def get(self, record_id):
        raise SnapshotNotFoundError(record_id)


def test_loading_a_record_deleted_elsewhere_warns(monkeypatch, flip_inputs):
    store = InMemoryStore()
    deals, profiles = _VanishingDeals(store), _VanishingProfiles(store)
    deals.save("Maadi", SharingModel.SLIDING, flip_inputs)
    profiles.save("Base", SharingModel.FLAT, flip_inputs)
    monkeypatch.setattr(storage, "get_repositories", lambda: (deals, profiles))

    page = AppTest.from_file(SAVED_DEALS_PATH, default_timeout=30)
    page.session_state["deal"] = {
        "model": SharingModel.SLIDING,
        "inputs": flip_inputs,
        "results": derive(SharingModel.SLIDING, flip_inputs),
    }
    page.run()

    next(b for b in page.button if b.label == "Load Deal").click().run()
    assert not page.exception
    assert "Deal was deleted in another session" in [w.value for w in page.warning]

    next(b for b in page.button if b.label == "Apply Profile").click().run()
    assert not page.exception
    assert "Profile was deleted in another session" in [w.value for w in page.warning]
