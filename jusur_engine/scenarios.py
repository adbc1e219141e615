"""
Model comparison: the same deal evaluated under every sharing model
"""
from dataclasses import dataclass
from typing import List, Optional

from .deal import DealInputs, DealResults, SharingModel
from .derivation import derive


@dataclass
class ModelComparison:
    """Results from one model run"""
    model: SharingModel
    results: DealResults
    is_current: bool = False

    @property
    def label(self) -> str:
        return self.model.label


def compare_models(
    inputs: DealInputs,
    current_model: Optional[SharingModel] = None,
) -> List[ModelComparison]:
    """Run every sharing model on the same inputs, in enum order"""
    return [
        ModelComparison(
            model=model,
            results=derive(model, inputs),
            is_current=model == current_model,
        )
        for model in SharingModel
    ]


def best_model_for_investor(comparisons: List[ModelComparison]) -> ModelComparison:
    """Model leaving the investor the most profit (first wins on ties)"""
    return max(comparisons, key=lambda c: c.results.investor_profit)


def best_model_for_manager(comparisons: List[ModelComparison]) -> ModelComparison:
    """Model giving the managing party the largest cut (first wins on ties)"""
    return max(comparisons, key=lambda c: c.results.profit_cut)
