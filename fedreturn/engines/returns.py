"""Return orchestrator.

Runs the full return pipeline over ReturnInputs:

  1. AGI = wages + interest + unemployment - capped student loan interest
  2. Standard deduction
  3. Taxable income = AGI - standard deduction
  4. Gross tax from the bracket schedule
  5. Child Tax Credit, Credit for Other Dependents and (placeholder) Earned
     Income Credit, against AGI
  6. Tax after credits
  7. Total withheld = W-2 Box 2 + estimated payments
  8. Refund (positive) or amount due (negative)
  9. Effective and marginal rates

AGI, taxable income and tax after credits are floored at zero. Validation is
a separate advisory pass and never blocks the calculation.
"""

import logging
from decimal import Decimal

from fedreturn.engines.brackets import STUDENT_LOAN_INTEREST_CAP, TAX_YEAR
from fedreturn.engines.credits import CreditEngine
from fedreturn.engines.deductions import StandardDeductionEngine
from fedreturn.engines.income_tax import IncomeTaxEngine
from fedreturn.exceptions import MissingTaxpayerInfoError
from fedreturn.models.returns import ReturnInputs, ReturnResults

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class ReturnCalculator:
    """Composes the tax, deduction and credit engines into a full return."""

    def __init__(self, tax_year: int = TAX_YEAR, as_of_year: int | None = None) -> None:
        self.tax_year = tax_year
        self.as_of_year = as_of_year
        self.income_tax = IncomeTaxEngine(tax_year)
        self.deductions = StandardDeductionEngine(tax_year)
        self.credits = CreditEngine()

    def calculate(self, inputs: ReturnInputs) -> ReturnResults:
        if inputs.taxpayer_info is None:
            raise MissingTaxpayerInfoError()

        taxpayer = inputs.taxpayer_info
        status = taxpayer.filing_status

        agi = self.calculate_agi(inputs)
        standard_deduction = self.deductions.compute_standard_deduction(taxpayer)
        taxable_income = max(agi - standard_deduction, ZERO)
        gross_tax = self.income_tax.compute_tax(taxable_income, status)

        child_tax_credit = self.credits.compute_child_tax_credit(
            inputs.dependents, agi, status, self.as_of_year
        )
        earned_income_credit = self.credits.compute_earned_income_credit(
            earned_income=self.calculate_earned_income(inputs),
            agi=agi,
            filing_status=status,
            qualifying_children=self.credits.qualifying_children_count(
                inputs.dependents, self.as_of_year
            ),
        )
        credit_for_other_dependents = self.credits.compute_credit_for_other_dependents(
            inputs.dependents, agi, status, self.as_of_year
        )
        total_credits = child_tax_credit + credit_for_other_dependents + earned_income_credit
        tax_after_credits = max(gross_tax - total_credits, ZERO)

        total_withheld = self.calculate_total_withholding(inputs)
        refund_or_amount_due = total_withheld - tax_after_credits

        logger.debug(
            "Calculated return: status=%s agi=%s taxable=%s tax=%s balance=%s",
            status, agi, taxable_income, tax_after_credits, refund_or_amount_due,
        )

        return ReturnResults(
            adjusted_gross_income=agi,
            standard_deduction=standard_deduction,
            taxable_income=taxable_income,
            gross_tax=gross_tax,
            income_tax=tax_after_credits,
            total_tax_withheld=total_withheld,
            refund_or_amount_due=refund_or_amount_due,
            child_tax_credit=child_tax_credit,
            credit_for_other_dependents=credit_for_other_dependents,
            earned_income_credit=earned_income_credit,
            effective_tax_rate=self.income_tax.effective_rate(tax_after_credits, taxable_income),
            marginal_tax_rate=self.income_tax.marginal_rate(taxable_income, status),
        )

    def calculate_if_ready(self, inputs: ReturnInputs) -> ReturnResults | None:
        """Calculate only once the minimum data is present.

        Returns None while there is no taxpayer info or no W-2, so callers can
        tell "no results yet" apart from a return that owes money.
        """
        if inputs.taxpayer_info is None or not inputs.w2_forms:
            logger.debug("Skipping calculation: no taxpayer info or W-2 forms yet")
            return None
        return self.calculate(inputs)

    @staticmethod
    def calculate_agi(inputs: ReturnInputs) -> Decimal:
        amounts = inputs.normalized_amounts()
        wages = sum((w2.box1_wages for w2 in inputs.w2_forms), ZERO)
        student_loan_deduction = min(amounts.student_loan_interest_paid, STUDENT_LOAN_INTEREST_CAP)
        agi = (
            wages
            + amounts.interest_income
            + amounts.unemployment_compensation
            - student_loan_deduction
        )
        return max(agi, ZERO)

    @staticmethod
    def calculate_total_withholding(inputs: ReturnInputs) -> Decimal:
        withheld = sum((w2.box2_federal_withheld for w2 in inputs.w2_forms), ZERO)
        return withheld + inputs.normalized_amounts().estimated_tax_payments

    @staticmethod
    def calculate_earned_income(inputs: ReturnInputs) -> Decimal:
        """Earned income for EIC purposes: W-2 Box 1 wages."""
        return sum((w2.box1_wages for w2 in inputs.w2_forms), ZERO)

    @staticmethod
    def validate(inputs: ReturnInputs) -> list[str]:
        """Return human-readable problems with the inputs, in a stable order.

        An empty list means the inputs look complete. The result is advisory.
        """
        errors: list[str] = []

        if inputs.taxpayer_info is None:
            errors.append("Taxpayer information is required")

        if not inputs.w2_forms:
            errors.append("At least one W-2 form is required")

        for index, w2 in enumerate(inputs.w2_forms, start=1):
            if not w2.employer_name.strip():
                errors.append(f"W-2 #{index}: Employer name is required")
            if not w2.employer_ein.strip():
                errors.append(f"W-2 #{index}: Employer EIN is required")
            if w2.box1_wages < ZERO:
                errors.append(f"W-2 #{index}: Wages cannot be negative")
            if w2.box2_federal_withheld < ZERO:
                errors.append(f"W-2 #{index}: Federal tax withheld cannot be negative")

        for index, dependent in enumerate(inputs.dependents, start=1):
            if not dependent.name.strip():
                errors.append(f"Dependent #{index}: Name is required")
            if not dependent.ssn.strip():
                errors.append(f"Dependent #{index}: SSN is required")
            if dependent.birth_date is None:
                errors.append(f"Dependent #{index}: Birth date is required")

        for value, label in (
            (inputs.interest_income, "Interest income"),
            (inputs.unemployment_compensation, "Unemployment compensation"),
            (inputs.student_loan_interest_paid, "Student loan interest paid"),
            (inputs.estimated_tax_payments, "Estimated tax payments"),
        ):
            if value is not None and value < ZERO:
                errors.append(f"{label} cannot be negative")

        return errors


def calculate_return(inputs: ReturnInputs, as_of_year: int | None = None) -> ReturnResults:
    """Compute a return with the current tax-year tables."""
    return ReturnCalculator(as_of_year=as_of_year).calculate(inputs)


def validate_return_inputs(inputs: ReturnInputs) -> list[str]:
    return ReturnCalculator.validate(inputs)
