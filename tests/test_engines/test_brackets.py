"""Tests for tax table completeness and consistency."""

from decimal import Decimal

import pytest

from fedreturn.engines.brackets import (
    CHILD_TAX_CREDIT_ELIGIBILITY_AGI_LIMIT,
    CHILD_TAX_CREDIT_PHASEOUT_THRESHOLD,
    FEDERAL_BRACKETS,
    FEDERAL_STANDARD_DEDUCTION,
    STUDENT_LOAN_INTEREST_PHASEOUT,
    TAX_YEAR,
    check_bracket_table,
    check_tables,
)
from fedreturn.exceptions import BracketTableError, TaxComputationError
from fedreturn.models.enums import FilingStatus

ALL_STATUSES = list(FilingStatus)


class TestFederalBrackets2024:
    def test_all_statuses_present(self):
        for status in ALL_STATUSES:
            assert status in FEDERAL_BRACKETS[TAX_YEAR], f"Missing {status}"

    def test_brackets_partition_non_negative_reals(self):
        for status in ALL_STATUSES:
            brackets = FEDERAL_BRACKETS[TAX_YEAR][status]
            assert brackets[0][0] == Decimal("0")
            for (_, upper, _), (next_lower, _, _) in zip(brackets, brackets[1:]):
                assert upper == next_lower, f"Gap or overlap for {status} at {upper}"

    def test_bracket_monotonicity(self):
        for status in ALL_STATUSES:
            for lower, upper, _ in FEDERAL_BRACKETS[TAX_YEAR][status]:
                if upper is not None:
                    assert upper > lower, f"Non-monotonic bracket for {status}"

    def test_rates_increase(self):
        for status in ALL_STATUSES:
            rates = [rate for _, _, rate in FEDERAL_BRACKETS[TAX_YEAR][status]]
            assert rates == sorted(rates)

    def test_top_bracket_is_unbounded(self):
        for status in ALL_STATUSES:
            brackets = FEDERAL_BRACKETS[TAX_YEAR][status]
            assert brackets[-1][1] is None
            assert all(upper is not None for _, upper, _ in brackets[:-1])

    def test_single_known_values(self):
        brackets = FEDERAL_BRACKETS[TAX_YEAR][FilingStatus.SINGLE]
        assert brackets[0] == (Decimal("0"), Decimal("11000"), Decimal("0.10"))
        assert brackets[1] == (Decimal("11000"), Decimal("44725"), Decimal("0.12"))
        assert brackets[-1] == (Decimal("626350"), None, Decimal("0.37"))

    def test_qualifying_widow_uses_joint_schedule(self):
        table = FEDERAL_BRACKETS[TAX_YEAR]
        assert table[FilingStatus.QW] == table[FilingStatus.MFJ]


class TestStatusKeyedTables:
    @pytest.mark.parametrize(
        "table",
        [
            FEDERAL_STANDARD_DEDUCTION[TAX_YEAR],
            CHILD_TAX_CREDIT_PHASEOUT_THRESHOLD,
            CHILD_TAX_CREDIT_ELIGIBILITY_AGI_LIMIT,
            STUDENT_LOAN_INTEREST_PHASEOUT,
        ],
    )
    def test_every_status_present(self, table):
        assert set(table) == set(FilingStatus)

    def test_known_standard_deductions(self):
        ded = FEDERAL_STANDARD_DEDUCTION[TAX_YEAR]
        assert ded[FilingStatus.SINGLE] == Decimal("14600")
        assert ded[FilingStatus.MFJ] == Decimal("29200")
        assert ded[FilingStatus.MFS] == Decimal("14600")
        assert ded[FilingStatus.HOH] == Decimal("21900")
        assert ded[FilingStatus.QW] == Decimal("29200")

    def test_shipped_tables_pass_check(self):
        check_tables()


class TestBracketTableCheck:
    def test_gap_is_rejected(self):
        brackets = [
            (Decimal("0"), Decimal("10000"), Decimal("0.10")),
            (Decimal("12000"), None, Decimal("0.20")),
        ]
        with pytest.raises(BracketTableError, match="starts at 12000"):
            check_bracket_table(2024, FilingStatus.SINGLE, brackets)

    def test_overlap_is_rejected(self):
        brackets = [
            (Decimal("0"), Decimal("10000"), Decimal("0.10")),
            (Decimal("9000"), None, Decimal("0.20")),
        ]
        with pytest.raises(BracketTableError):
            check_bracket_table(2024, FilingStatus.SINGLE, brackets)

    def test_bounded_top_is_rejected(self):
        brackets = [(Decimal("0"), Decimal("10000"), Decimal("0.10"))]
        with pytest.raises(BracketTableError, match="unbounded"):
            check_bracket_table(2024, FilingStatus.SINGLE, brackets)

    def test_unbounded_middle_is_rejected(self):
        brackets = [
            (Decimal("0"), None, Decimal("0.10")),
            (Decimal("10000"), None, Decimal("0.20")),
        ]
        with pytest.raises(BracketTableError, match="not last"):
            check_bracket_table(2024, FilingStatus.SINGLE, brackets)

    def test_nonzero_start_is_rejected(self):
        brackets = [(Decimal("100"), None, Decimal("0.10"))]
        with pytest.raises(BracketTableError):
            check_bracket_table(2024, FilingStatus.SINGLE, brackets)

    def test_empty_table_is_rejected(self):
        with pytest.raises(BracketTableError, match="no brackets"):
            check_bracket_table(2024, FilingStatus.HOH, [])

    def test_is_a_tax_computation_error(self):
        with pytest.raises(TaxComputationError):
            check_bracket_table(2024, FilingStatus.HOH, [])
