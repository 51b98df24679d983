"""Tax bracket configuration.

Federal brackets, standard deductions, credit amounts and thresholds.
Keyed by tax year and filing status. Never hardcode these in computation functions.

Every table keyed by FilingStatus must list every status; the tables are
checked when this module is imported and a defect raises BracketTableError.
"""

from decimal import Decimal

from fedreturn.exceptions import BracketTableError
from fedreturn.models.enums import FilingStatus

TAX_YEAR = 2024

# ---------------------------------------------------------------------------
# Federal ordinary income brackets:
#   {year: {filing_status: [(lower_bound, upper_bound, rate), ...]}}
# Upper bound is None for the top bracket. Income in (lower, upper] is taxed
# at rate.
# ---------------------------------------------------------------------------
_JOINT_2024: list[tuple[Decimal, Decimal | None, Decimal]] = [
    (Decimal("0"), Decimal("22000"), Decimal("0.10")),
    (Decimal("22000"), Decimal("89450"), Decimal("0.12")),
    (Decimal("89450"), Decimal("190750"), Decimal("0.22")),
    (Decimal("190750"), Decimal("364200"), Decimal("0.24")),
    (Decimal("364200"), Decimal("462500"), Decimal("0.32")),
    (Decimal("462500"), Decimal("693750"), Decimal("0.35")),
    (Decimal("693750"), None, Decimal("0.37")),
]

FEDERAL_BRACKETS: dict[int, dict[FilingStatus, list[tuple[Decimal, Decimal | None, Decimal]]]] = {
    2024: {
        FilingStatus.SINGLE: [
            (Decimal("0"), Decimal("11000"), Decimal("0.10")),
            (Decimal("11000"), Decimal("44725"), Decimal("0.12")),
            (Decimal("44725"), Decimal("95375"), Decimal("0.22")),
            (Decimal("95375"), Decimal("197050"), Decimal("0.24")),
            (Decimal("197050"), Decimal("250525"), Decimal("0.32")),
            (Decimal("250525"), Decimal("626350"), Decimal("0.35")),
            (Decimal("626350"), None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: _JOINT_2024,
        FilingStatus.MFS: [
            (Decimal("0"), Decimal("11000"), Decimal("0.10")),
            (Decimal("11000"), Decimal("44725"), Decimal("0.12")),
            (Decimal("44725"), Decimal("95375"), Decimal("0.22")),
            (Decimal("95375"), Decimal("182050"), Decimal("0.24")),
            (Decimal("182050"), Decimal("231250"), Decimal("0.32")),
            (Decimal("231250"), Decimal("346875"), Decimal("0.35")),
            (Decimal("346875"), None, Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("0"), Decimal("15700"), Decimal("0.10")),
            (Decimal("15700"), Decimal("59850"), Decimal("0.12")),
            (Decimal("59850"), Decimal("95350"), Decimal("0.22")),
            (Decimal("95350"), Decimal("197050"), Decimal("0.24")),
            (Decimal("197050"), Decimal("250500"), Decimal("0.32")),
            (Decimal("250500"), Decimal("626350"), Decimal("0.35")),
            (Decimal("626350"), None, Decimal("0.37")),
        ],
        FilingStatus.QW: _JOINT_2024,
    },
}

# ---------------------------------------------------------------------------
# Federal standard deduction
# ---------------------------------------------------------------------------
FEDERAL_STANDARD_DEDUCTION: dict[int, dict[FilingStatus, Decimal]] = {
    2024: {
        FilingStatus.SINGLE: Decimal("14600"),
        FilingStatus.MFJ: Decimal("29200"),
        FilingStatus.MFS: Decimal("14600"),
        FilingStatus.HOH: Decimal("21900"),
        FilingStatus.QW: Decimal("29200"),
    },
}

# Additional standard deduction per person aged 65+ and per blind person.
# Married (MFJ or MFS) and unmarried amounts are separate constants.
ADDITIONAL_STANDARD_DEDUCTION_MARRIED: dict[int, Decimal] = {2024: Decimal("1300")}
ADDITIONAL_STANDARD_DEDUCTION_UNMARRIED: dict[int, Decimal] = {2024: Decimal("1550")}
ADDITIONAL_DEDUCTION_AGE = 65

# Flat deduction for a filer who can be claimed as someone else's dependent.
# The earned income + $400 alternative is not applied.
DEPENDENT_STANDARD_DEDUCTION: dict[int, Decimal] = {2024: Decimal("1300")}

# ---------------------------------------------------------------------------
# Above-the-line adjustments
# ---------------------------------------------------------------------------
STUDENT_LOAN_INTEREST_CAP = Decimal("2500")
STUDENT_LOAN_INTEREST_PHASEOUT: dict[FilingStatus, Decimal] = {
    FilingStatus.SINGLE: Decimal("90000"),
    FilingStatus.MFJ: Decimal("185000"),
    FilingStatus.MFS: Decimal("90000"),
    FilingStatus.HOH: Decimal("90000"),
    FilingStatus.QW: Decimal("90000"),
}

# ---------------------------------------------------------------------------
# Child Tax Credit / Credit for Other Dependents
# ---------------------------------------------------------------------------
CHILD_TAX_CREDIT_PER_CHILD = Decimal("2000")
OTHER_DEPENDENT_CREDIT = Decimal("500")
CHILD_TAX_CREDIT_AGE_LIMIT = 17  # must be under this age

CHILD_TAX_CREDIT_PHASEOUT_THRESHOLD: dict[FilingStatus, Decimal] = {
    FilingStatus.SINGLE: Decimal("200000"),
    FilingStatus.MFJ: Decimal("400000"),
    FilingStatus.MFS: Decimal("200000"),
    FilingStatus.HOH: Decimal("200000"),
    FilingStatus.QW: Decimal("400000"),
}
# $50 reduction for each full $1,000 of AGI over the threshold
CHILD_TAX_CREDIT_PHASEOUT_STEP = Decimal("1000")
CHILD_TAX_CREDIT_PHASEOUT_PER_STEP = Decimal("50")

# Quick eligibility screen only. Qualifying widow(er)s get the single-tier limit
# here even though the phase-out itself treats them as joint.
CHILD_TAX_CREDIT_ELIGIBILITY_AGI_LIMIT: dict[FilingStatus, Decimal] = {
    FilingStatus.SINGLE: Decimal("200000"),
    FilingStatus.MFJ: Decimal("400000"),
    FilingStatus.MFS: Decimal("200000"),
    FilingStatus.HOH: Decimal("200000"),
    FilingStatus.QW: Decimal("200000"),
}

# ---------------------------------------------------------------------------
# Earned Income Credit: PLACEHOLDER values, not the IRS EIC tables.
# ---------------------------------------------------------------------------
EIC_PLACEHOLDER_MAX_AGI: dict[int, Decimal] = {
    0: Decimal("18650"),
    1: Decimal("46560"),
    2: Decimal("52918"),
    3: Decimal("56838"),  # three or more children
}
EIC_PLACEHOLDER_JOINT_ADDITION = Decimal("6000")
EIC_PLACEHOLDER_PER_CHILD = Decimal("1000")
EIC_PLACEHOLDER_CAP = Decimal("2000")
EIC_ELIGIBILITY_AGI_LIMIT = Decimal("63000")


# ---------------------------------------------------------------------------
# Load-time integrity checks
# ---------------------------------------------------------------------------
def check_bracket_table(
    tax_year: int,
    filing_status: FilingStatus,
    brackets: list[tuple[Decimal, Decimal | None, Decimal]],
) -> None:
    """Raise BracketTableError unless brackets partition [0, inf) in order."""
    if not brackets:
        raise BracketTableError(tax_year, filing_status, "no brackets")

    expected_lower = Decimal("0")
    for index, (lower, upper, rate) in enumerate(brackets):
        if lower != expected_lower:
            raise BracketTableError(
                tax_year,
                filing_status,
                f"bracket {index} starts at {lower}, expected {expected_lower}",
            )
        if rate < 0:
            raise BracketTableError(tax_year, filing_status, f"bracket {index} has a negative rate")
        is_last = index == len(brackets) - 1
        if upper is None:
            if not is_last:
                raise BracketTableError(
                    tax_year, filing_status, f"bracket {index} is unbounded but not last"
                )
            return
        if upper <= lower:
            raise BracketTableError(
                tax_year, filing_status, f"bracket {index} upper {upper} <= lower {lower}"
            )
        expected_lower = upper

    raise BracketTableError(tax_year, filing_status, "top bracket must be unbounded")


def check_tables() -> None:
    """Check every status-keyed table. Called on import."""
    for tax_year, by_status in FEDERAL_BRACKETS.items():
        for status in FilingStatus:
            if status not in by_status:
                raise BracketTableError(tax_year, status, "missing brackets")
            check_bracket_table(tax_year, status, by_status[status])

        deductions = FEDERAL_STANDARD_DEDUCTION.get(tax_year, {})
        for status in FilingStatus:
            if status not in deductions:
                raise BracketTableError(tax_year, status, "missing standard deduction")

    for name, table in (
        ("child tax credit phase-out threshold", CHILD_TAX_CREDIT_PHASEOUT_THRESHOLD),
        ("child tax credit eligibility limit", CHILD_TAX_CREDIT_ELIGIBILITY_AGI_LIMIT),
        ("student loan interest phase-out", STUDENT_LOAN_INTEREST_PHASEOUT),
    ):
        for status in FilingStatus:
            if status not in table:
                raise BracketTableError(TAX_YEAR, status, f"missing {name}")


check_tables()
