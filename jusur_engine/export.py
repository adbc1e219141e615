"""
CSV and Excel export for the Jusur calculator
The engine supplies numbers and enums; formatting happens here
"""
from io import BytesIO
from typing import List, Optional, Tuple
from datetime import datetime
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
import pandas as pd

from .breakeven import analyze_break_even
from .deal import DealInputs, DealResults, SharingModel
from .scenarios import compare_models
from .sensitivity import sensitivity, sweep_to_frame
from .timeline import build_timeline, timeline_to_frame

logger = logging.getLogger(__name__)

# iOS palette for Excel headers
COLORS = {
    "blue": "007AFF",
    "light_blue": "5AC8FA",
    "green": "34C759",
    "white": "FFFFFF",
    "gray": "8E8E93",
}


def export_filename(model: SharingModel, extension: str = "csv") -> str:
    return f"JusurCalc_{model.value}.{extension}"


def report_rows(
    model: SharingModel,
    inputs: DealInputs,
    results: DealResults,
) -> List[Tuple[str, object]]:
    """(label, value) pairs for the single-deal report"""
    return [
        ("Model", model.value),
        ("Buy Price", inputs.buy_price),
        ("Buy Commission (%)", inputs.buy_commission_pct),
        ("Buy Commission Amount", results.buy_commission_amount),
        ("Cost to Buy", results.cost_to_buy),
        ("Sell Price", inputs.sell_price),
        ("Sell Commission (%)", inputs.sell_commission_pct),
        ("Sell Commission Amount", results.sell_commission_amount),
        ("Agent Commission", results.agent_commission_amount),
        ("Transaction Tax", results.transaction_tax_amount),
        ("Other Expenses", results.other_expenses),
        ("Net Sale Revenue", results.net_sale_revenue),
        ("Total Profit", results.total_profit),
        ("Jusur %", results.share_pct),
        ("Jusur Profit Cut", results.profit_cut),
        ("Investor Profit", results.investor_profit),
        ("Investor ROI %", results.investor_roi_pct),
        ("Jusur Total Revenue", results.managing_party_revenue),
        ("Your Share (50%)", results.your_share),
        ("Partner Share (50%)", results.partner_share),
    ]


def results_summary(results: DealResults) -> str:
    """One-line ROI and profit summary for sharing"""
    return f"Investment ROI: {results.investor_roi_pct:.2f}%, Total Profit: {results.total_profit:,.0f}"


def export_results_to_csv(
    model: SharingModel,
    inputs: DealInputs,
    results: DealResults,
) -> str:
    """
    Export one deal to a Metric,Value CSV string

    Args:
        model: Sharing model used
        inputs: Deal inputs
        results: Derived results

    Returns:
        CSV string
    """
    df = pd.DataFrame(report_rows(model, inputs, results), columns=["Metric", "Value"])
    return df.to_csv(index=False, lineterminator="\n")


def comparison_frame(inputs: DealInputs, current_model: Optional[SharingModel] = None) -> pd.DataFrame:
    """One row per sharing model"""
    rows = []
    for c in compare_models(inputs, current_model):
        rows.append({
            "Model": c.label,
            "Current": c.is_current,
            "Total Profit": c.results.total_profit,
            "Jusur %": c.results.share_pct,
            "Jusur Profit Cut": c.results.profit_cut,
            "Investor Profit": c.results.investor_profit,
            "Investor ROI %": c.results.investor_roi_pct,
            "Your Share": c.results.your_share,
        })
    return pd.DataFrame(rows)


def export_comparison_to_csv(inputs: DealInputs, current_model: Optional[SharingModel] = None) -> str:
    return comparison_frame(inputs, current_model).to_csv(index=False, lineterminator="\n")


def export_sensitivity_to_csv(inputs: DealInputs, results: DealResults) -> str:
    """Sensitivity sweep as CSV (header only when the deal has no profit)"""
    return sweep_to_frame(sensitivity(inputs, results)).to_csv(index=False, lineterminator="\n")


def create_excel_workbook(
    model: SharingModel,
    inputs: DealInputs,
    results: DealResults,
    deal_name: str = "Untitled Deal",
    include_comparison: bool = True,
    include_sensitivity: bool = True,
) -> BytesIO:
    """
    Create an Excel workbook for one deal

    Args:
        model: Sharing model used
        inputs: Deal inputs
        results: Derived results
        deal_name: Title shown on the summary sheet
        include_comparison: Add the model comparison sheet
        include_sensitivity: Add the sensitivity sheet

    Returns:
        BytesIO buffer with the .xlsx file
    """
    wb = Workbook()

    _create_summary_sheet(wb, model, inputs, results, deal_name)

    if include_comparison:
        _create_frame_sheet(wb, "Model Comparison", comparison_frame(inputs, model))

    if include_sensitivity:
        _create_frame_sheet(wb, "Sensitivity", sweep_to_frame(sensitivity(inputs, results)))

    _create_frame_sheet(wb, "Timeline", timeline_to_frame(build_timeline(inputs, results)))
    _create_inputs_sheet(wb, inputs)

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)

    logger.info(f"Created workbook for '{deal_name}' ({model.value}) with {len(wb.sheetnames)} sheets")
    return buffer


def _apply_header_style(cell):
    """Apply header styling to cell"""
    cell.font = Font(bold=True, color=COLORS["white"])
    cell.fill = PatternFill(start_color=COLORS["blue"], end_color=COLORS["blue"], fill_type="solid")
    cell.alignment = Alignment(horizontal="center", vertical="center")


def _apply_number_format(cell, format_type: str = "number"):
    """Apply number formatting"""
    formats = {
        "number": "#,##0",
        "percent": "0.00%",
        "decimal": "0.00",
    }
    cell.number_format = formats.get(format_type, "#,##0")


def _create_summary_sheet(
    wb: Workbook,
    model: SharingModel,
    inputs: DealInputs,
    results: DealResults,
    deal_name: str,
):
    ws = wb.active
    ws.title = "Summary"

    ws["A1"] = deal_name.upper()
    ws["A1"].font = Font(bold=True, size=16, color=COLORS["blue"])
    ws.merge_cells("A1:C1")

    ws["A2"] = f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    ws["A2"].font = Font(italic=True, color=COLORS["gray"])

    row = 4
    for col, header in enumerate(["Metric", "Value"], 1):
        _apply_header_style(ws.cell(row=row, column=col, value=header))

    for label, value in report_rows(model, inputs, results):
        row += 1
        ws.cell(row=row, column=1, value=label)
        cell = ws.cell(row=row, column=2, value=value)
        if label == "Jusur %":
            _apply_number_format(cell, "percent")
        elif "%" in label:
            _apply_number_format(cell, "decimal")
        elif isinstance(value, (int, float)):
            _apply_number_format(cell, "number")

    # Break-even
    row += 2
    ws.cell(row=row, column=1, value="BREAK-EVEN").font = Font(bold=True, size=12)
    analysis = analyze_break_even(inputs)
    row += 1
    ws.cell(row=row, column=1, value=f"Sale price for {analysis.target_roi_pct:g}% ROI")
    if analysis.achievable:
        _apply_number_format(ws.cell(row=row, column=2, value=analysis.price), "number")
    else:
        ws.cell(row=row, column=2, value="Not achievable")

    ws.column_dimensions["A"].width = 28
    ws.column_dimensions["B"].width = 18


def _create_frame_sheet(wb: Workbook, title: str, df: pd.DataFrame):
    """Write a DataFrame as a styled table"""
    ws = wb.create_sheet(title=title)

    for col, header in enumerate(df.columns, 1):
        _apply_header_style(ws.cell(row=1, column=col, value=header))

    for i, record in enumerate(df.itertuples(index=False), 2):
        for col, value in enumerate(record, 1):
            if hasattr(value, "item"):
                value = value.item()
            cell = ws.cell(row=i, column=col, value=value)
            if isinstance(value, float) and "%" not in str(df.columns[col - 1]):
                _apply_number_format(cell, "number")

    for col in range(1, len(df.columns) + 1):
        ws.column_dimensions[ws.cell(row=1, column=col).column_letter].width = 18


def _create_inputs_sheet(wb: Workbook, inputs: DealInputs):
    ws = wb.create_sheet(title="Inputs")

    ws["A1"] = "DEAL INPUTS"
    ws["A1"].font = Font(bold=True, size=14)

    for row, (name, value) in enumerate(inputs.to_dict().items(), 3):
        ws.cell(row=row, column=1, value=name)
        ws.cell(row=row, column=2, value=value)

    ws.column_dimensions["A"].width = 28
    ws.column_dimensions["B"].width = 18
