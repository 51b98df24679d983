"""Progressive income tax engine.

Gross tax, marginal rate and effective rate for a taxable income under the
federal bracket schedule of a filing status.
"""

from decimal import ROUND_HALF_UP, Decimal

from fedreturn.engines.brackets import FEDERAL_BRACKETS, TAX_YEAR
from fedreturn.models.brackets import TaxBracket
from fedreturn.models.enums import FilingStatus

ZERO = Decimal("0")
WHOLE_DOLLAR = Decimal("1")


class IncomeTaxEngine:
    """Applies the federal bracket schedule. Holds no state."""

    def __init__(self, tax_year: int = TAX_YEAR) -> None:
        self.tax_year = tax_year

    def brackets(self, filing_status: FilingStatus) -> list[TaxBracket]:
        """Ordered brackets for a filing status."""
        table = FEDERAL_BRACKETS.get(self.tax_year, {}).get(filing_status)
        if not table:
            raise ValueError(f"No federal brackets for {self.tax_year}/{filing_status}")
        return [
            TaxBracket(lower_bound=lower, upper_bound=upper, rate=rate)
            for lower, upper, rate in table
        ]

    def compute_tax(self, taxable_income: Decimal, filing_status: FilingStatus) -> Decimal:
        """Compute tax on taxable income, rounded half-up to whole dollars."""
        if taxable_income <= ZERO:
            return ZERO

        tax = ZERO
        remaining = taxable_income
        for bracket in self.brackets(filing_status):
            if remaining <= ZERO:
                break
            width = bracket.width
            in_bracket = remaining if width is None else min(remaining, width)
            tax += in_bracket * bracket.rate
            remaining -= in_bracket

        return tax.quantize(WHOLE_DOLLAR, rounding=ROUND_HALF_UP)

    def marginal_rate(self, taxable_income: Decimal, filing_status: FilingStatus) -> Decimal:
        """Rate applied to the next dollar of taxable income."""
        bracket = self.bracket_for(taxable_income, filing_status)
        if bracket is None:
            return ZERO
        return bracket.rate

    def bracket_for(
        self, taxable_income: Decimal, filing_status: FilingStatus
    ) -> TaxBracket | None:
        """Bracket whose (lower, upper] interval holds the income, None at or below zero."""
        if taxable_income <= ZERO:
            return None
        brackets = self.brackets(filing_status)
        for bracket in brackets:
            if bracket.contains(taxable_income):
                return bracket
        return brackets[-1]

    @staticmethod
    def effective_rate(tax: Decimal, taxable_income: Decimal) -> Decimal:
        """Tax divided by taxable income, unrounded. Zero when there is no taxable income."""
        if taxable_income <= ZERO:
            return ZERO
        return tax / taxable_income
