"""Data models for fedreturn."""

from fedreturn.models.brackets import TaxBracket
from fedreturn.models.enums import FilingStatus
from fedreturn.models.returns import (
    AdditionalStandardDeduction,
    CreditEligibility,
    NormalizedAmounts,
    ReturnInputs,
    ReturnResults,
)
from fedreturn.models.tax_forms import W2
from fedreturn.models.taxpayer import Dependent, TaxpayerInfo

__all__ = [
    "AdditionalStandardDeduction",
    "CreditEligibility",
    "Dependent",
    "FilingStatus",
    "NormalizedAmounts",
    "ReturnInputs",
    "ReturnResults",
    "TaxBracket",
    "TaxpayerInfo",
    "W2",
]
