"""Credit engine: Child Tax Credit, Credit for Other Dependents, Earned Income Credit.

CTC and ODC split the dependent list into two disjoint groups and phase out
independently against the same AGI threshold.

The Earned Income Credit here is a PLACEHOLDER. It checks a rough AGI
ceiling and pays $1,000 per qualifying child up to $2,000. It does not use
the IRS EIC tables and must not be presented as an accurate EIC amount.
"""

from datetime import date
from decimal import Decimal

from fedreturn.engines.brackets import (
    CHILD_TAX_CREDIT_AGE_LIMIT,
    CHILD_TAX_CREDIT_ELIGIBILITY_AGI_LIMIT,
    CHILD_TAX_CREDIT_PER_CHILD,
    CHILD_TAX_CREDIT_PHASEOUT_PER_STEP,
    CHILD_TAX_CREDIT_PHASEOUT_STEP,
    CHILD_TAX_CREDIT_PHASEOUT_THRESHOLD,
    EIC_ELIGIBILITY_AGI_LIMIT,
    EIC_PLACEHOLDER_CAP,
    EIC_PLACEHOLDER_JOINT_ADDITION,
    EIC_PLACEHOLDER_MAX_AGI,
    EIC_PLACEHOLDER_PER_CHILD,
    OTHER_DEPENDENT_CREDIT,
    STUDENT_LOAN_INTEREST_PHASEOUT,
)
from fedreturn.models.enums import FilingStatus
from fedreturn.models.returns import CreditEligibility
from fedreturn.models.taxpayer import Dependent

ZERO = Decimal("0")


class CreditEngine:
    """Computes dependent credits and the placeholder EIC."""

    def is_qualifying_child(self, dependent: Dependent, as_of_year: int | None = None) -> bool:
        """Qualifying child for CTC: flagged as such and under 17.

        Age is the calendar-year difference, not day-precise.
        """
        year = as_of_year if as_of_year is not None else date.today().year
        age = dependent.age_in(year)
        if age is None:
            return False
        return dependent.is_qualifying_child and age < CHILD_TAX_CREDIT_AGE_LIMIT

    def qualifying_children_count(
        self, dependents: list[Dependent], as_of_year: int | None = None
    ) -> int:
        return sum(1 for d in dependents if self.is_qualifying_child(d, as_of_year))

    def compute_child_tax_credit(
        self,
        dependents: list[Dependent],
        agi: Decimal,
        filing_status: FilingStatus,
        as_of_year: int | None = None,
    ) -> Decimal:
        children = self.qualifying_children_count(dependents, as_of_year)
        credit = CHILD_TAX_CREDIT_PER_CHILD * children
        return self._phase_out(credit, agi, filing_status)

    def compute_credit_for_other_dependents(
        self,
        dependents: list[Dependent],
        agi: Decimal,
        filing_status: FilingStatus,
        as_of_year: int | None = None,
    ) -> Decimal:
        others = len(dependents) - self.qualifying_children_count(dependents, as_of_year)
        credit = OTHER_DEPENDENT_CREDIT * others
        return self._phase_out(credit, agi, filing_status)

    def compute_earned_income_credit(
        self,
        earned_income: Decimal,
        agi: Decimal,
        filing_status: FilingStatus,
        qualifying_children: int,
    ) -> Decimal:
        """Placeholder EIC. Not IRS-accurate; see module docstring."""
        if earned_income <= ZERO or agi > self.eic_max_agi(filing_status, qualifying_children):
            return ZERO
        if qualifying_children <= 0:
            return ZERO
        return min(EIC_PLACEHOLDER_PER_CHILD * qualifying_children, EIC_PLACEHOLDER_CAP)

    @staticmethod
    def eic_max_agi(filing_status: FilingStatus, qualifying_children: int) -> Decimal:
        ceiling = EIC_PLACEHOLDER_MAX_AGI[min(max(qualifying_children, 0), 3)]
        if filing_status.is_joint:
            ceiling += EIC_PLACEHOLDER_JOINT_ADDITION
        return ceiling

    @staticmethod
    def credit_eligibility(agi: Decimal, filing_status: FilingStatus) -> CreditEligibility:
        """Quick AGI screen for the credits and the student loan interest adjustment."""
        return CreditEligibility(
            child_tax_credit_eligible=(
                agi < CHILD_TAX_CREDIT_ELIGIBILITY_AGI_LIMIT[filing_status]
            ),
            earned_income_credit_eligible=agi < EIC_ELIGIBILITY_AGI_LIMIT,
            student_loan_interest_eligible=agi < STUDENT_LOAN_INTEREST_PHASEOUT[filing_status],
        )

    @staticmethod
    def _phase_out(credit: Decimal, agi: Decimal, filing_status: FilingStatus) -> Decimal:
        """Reduce by $50 per full $1,000 of AGI over the threshold, floored at zero."""
        threshold = CHILD_TAX_CREDIT_PHASEOUT_THRESHOLD[filing_status]
        if agi <= threshold:
            return credit
        steps = (agi - threshold) // CHILD_TAX_CREDIT_PHASEOUT_STEP
        return max(credit - steps * CHILD_TAX_CREDIT_PHASEOUT_PER_STEP, ZERO)
