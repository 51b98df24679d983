"""Return input and result models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fedreturn.models.tax_forms import W2
from fedreturn.models.taxpayer import Dependent, TaxpayerInfo

ZERO = Decimal("0")


class NormalizedAmounts(BaseModel):
    """Optional scalar inputs with absent values mapped to zero."""

    interest_income: Decimal
    unemployment_compensation: Decimal
    student_loan_interest_paid: Decimal
    estimated_tax_payments: Decimal


class ReturnInputs(BaseModel):
    """Everything the calculator needs for one return.

    This is the document the surrounding application persists. Derived
    results are never stored alongside it.
    """

    taxpayer_info: TaxpayerInfo | None = None
    w2_forms: list[W2] = Field(default_factory=list)
    dependents: list[Dependent] = Field(default_factory=list)
    interest_income: Decimal | None = None
    unemployment_compensation: Decimal | None = None
    student_loan_interest_paid: Decimal | None = None
    estimated_tax_payments: Decimal | None = None

    def normalized_amounts(self) -> NormalizedAmounts:
        return NormalizedAmounts(
            interest_income=self.interest_income or ZERO,
            unemployment_compensation=self.unemployment_compensation or ZERO,
            student_loan_interest_paid=self.student_loan_interest_paid or ZERO,
            estimated_tax_payments=self.estimated_tax_payments or ZERO,
        )


class ReturnResults(BaseModel):
    """Computed return. Regenerated wholesale on every calculation."""

    model_config = ConfigDict(frozen=True)

    adjusted_gross_income: Decimal
    standard_deduction: Decimal
    taxable_income: Decimal
    gross_tax: Decimal
    income_tax: Decimal  # after credits
    total_tax_withheld: Decimal
    refund_or_amount_due: Decimal  # positive = refund
    child_tax_credit: Decimal
    credit_for_other_dependents: Decimal = ZERO
    earned_income_credit: Decimal
    effective_tax_rate: Decimal
    marginal_tax_rate: Decimal

    @property
    def is_refund(self) -> bool:
        return self.refund_or_amount_due > ZERO

    @property
    def amount_due(self) -> Decimal:
        return max(-self.refund_or_amount_due, ZERO)


class AdditionalStandardDeduction(BaseModel):
    """Age and blindness add-ons to the standard deduction."""

    age_deduction: Decimal = ZERO
    blindness_deduction: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return self.age_deduction + self.blindness_deduction


class CreditEligibility(BaseModel):
    child_tax_credit_eligible: bool
    earned_income_credit_eligible: bool
    student_loan_interest_eligible: bool
