"""Tax computation engines."""

from fedreturn.engines.credits import CreditEngine
from fedreturn.engines.deductions import StandardDeductionEngine
from fedreturn.engines.income_tax import IncomeTaxEngine
from fedreturn.engines.returns import (
    ReturnCalculator,
    calculate_return,
    validate_return_inputs,
)

__all__ = [
    "CreditEngine",
    "IncomeTaxEngine",
    "ReturnCalculator",
    "StandardDeductionEngine",
    "calculate_return",
    "validate_return_inputs",
]
