"""
Jusur Calculator Engine Package
Profit-sharing calculations for buy/sell investment deals
"""

# Inputs, results and models
from .deal import (
    DealInputs,
    DealResults,
    SharingModel,
    AgentCommissionMode,
    MODEL_LABELS,
    create_default_inputs,
)

# Core derivation
from .derivation import (
    derive,
    derive_all,
    acquisition_cost,
    net_sale_revenue,
)

# Model strategies
from .models import (
    STRATEGIES,
    calculate_share_pct,
    progressive_cut,
)

# Break-even
from .breakeven import (
    break_even,
    required_sell_price,
    is_achievable,
    analyze_break_even,
    BreakEvenResult,
)

# Sensitivity analysis
from .sensitivity import (
    sensitivity,
    sweep_to_frame,
    SamplePoint,
    ModelOutcome,
    SensitivitySweep,
    PROFIT_MULTIPLIERS,
)

# Model comparison
from .scenarios import (
    ModelComparison,
    compare_models,
    best_model_for_investor,
    best_model_for_manager,
)

# Timeline
from .timeline import (
    TimelinePoint,
    build_timeline,
    timeline_to_frame,
)

__all__ = [
    # Deal
    "DealInputs",
    "DealResults",
    "SharingModel",
    "AgentCommissionMode",
    "MODEL_LABELS",
    "create_default_inputs",
    # Derivation
    "derive",
    "derive_all",
    "acquisition_cost",
    "net_sale_revenue",
    # Models
    "STRATEGIES",
    "calculate_share_pct",
    "progressive_cut",
    # Break-even
    "break_even",
    "required_sell_price",
    "is_achievable",
    "analyze_break_even",
    "BreakEvenResult",
    # Sensitivity
    "sensitivity",
    "sweep_to_frame",
    "SamplePoint",
    "ModelOutcome",
    "SensitivitySweep",
    "PROFIT_MULTIPLIERS",
    # Scenarios
    "ModelComparison",
    "compare_models",
    "best_model_for_investor",
    "best_model_for_manager",
    # Timeline
    "TimelinePoint",
    "build_timeline",
    "timeline_to_frame",
]
