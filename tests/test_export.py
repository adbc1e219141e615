"""Tests for CSV and Excel export."""
from io import StringIO

import pandas as pd
import pytest
from openpyxl import load_workbook

from jusur_engine.deal import SharingModel
from jusur_engine.derivation import derive
from jusur_engine.export import (
    create_excel_workbook,
    export_comparison_to_csv,
    export_filename,
    export_results_to_csv,
    export_sensitivity_to_csv,
    report_rows,
    results_summary,
)


@pytest.fixture
def sliding_results(flip_inputs):
    return derive(SharingModel.SLIDING, flip_inputs)


def test_filename():
    assert export_filename(SharingModel.SLIDING) == "JusurCalc_SLIDING.csv"
    assert export_filename(SharingModel.ROI_TIERED, "xlsx") == "JusurCalc_ROI.xlsx"


def test_results_csv(flip_inputs, sliding_results):
    csv = export_results_to_csv(SharingModel.SLIDING, flip_inputs, sliding_results)
    lines = csv.strip().split("\n")

    assert lines[0] == "Metric,Value"
    assert lines[1] == "Model,SLIDING"
    assert len(lines) == 21
    assert "Total Profit,1436000.0" in lines

    frame = pd.read_csv(StringIO(csv))
    assert list(frame["Metric"]) == [label for label, _ in report_rows(SharingModel.SLIDING, flip_inputs, sliding_results)]


def test_comparison_csv(flip_inputs):
    frame = pd.read_csv(StringIO(export_comparison_to_csv(flip_inputs, SharingModel.FLAT)))

    assert list(frame["Model"]) == [m.label for m in SharingModel]
    assert list(frame["Current"]) == [False, False, True, False]


def test_sensitivity_csv(flip_inputs, sliding_results, loss_inputs):
    frame = pd.read_csv(StringIO(export_sensitivity_to_csv(flip_inputs, sliding_results)))
    assert len(frame) == 11

    empty = export_sensitivity_to_csv(loss_inputs, derive(SharingModel.SLIDING, loss_inputs))
    assert empty.strip() == "Multiplier,Total Profit,Sell Price"


def test_excel_workbook(flip_inputs, sliding_results):
    buffer = create_excel_workbook(SharingModel.SLIDING, flip_inputs, sliding_results, deal_name="Maadi")
    wb = load_workbook(buffer)

    assert wb.sheetnames == ["Summary", "Model Comparison", "Sensitivity", "Timeline", "Inputs"]
    summary = wb["Summary"]
    assert summary["A1"].value == "MAADI"
    assert summary["A5"].value == "Model"
    assert summary["B5"].value == "SLIDING"
    assert wb["Model Comparison"].max_row == 5


def test_excel_workbook_optional_sheets(loss_inputs):
    results = derive(SharingModel.FLAT, loss_inputs)
    buffer = create_excel_workbook(
        SharingModel.FLAT,
        loss_inputs,
        results,
        include_comparison=False,
        include_sensitivity=False,
    )

    assert load_workbook(buffer).sheetnames == ["Summary", "Timeline", "Inputs"]


def test_results_summary(sliding_results):
    assert results_summary(sliding_results) == "Investment ROI: 15.75%, Total Profit: 1,436,000"
