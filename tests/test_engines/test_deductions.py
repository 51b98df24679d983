"""Tests for StandardDeductionEngine."""

from decimal import Decimal

import pytest

from fedreturn.engines.deductions import StandardDeductionEngine
from fedreturn.models.enums import FilingStatus
from fedreturn.models.taxpayer import TaxpayerInfo


@pytest.fixture
def engine():
    return StandardDeductionEngine()


class TestBaseDeduction:
    def test_single(self, engine, single_taxpayer):
        assert engine.compute_standard_deduction(single_taxpayer) == Decimal("14600")

    def test_single_age_35(self, engine):
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.SINGLE, age=35)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("14600")

    def test_married_filing_jointly(self, engine, joint_taxpayer):
        assert engine.compute_standard_deduction(joint_taxpayer) == Decimal("29200")

    def test_head_of_household(self, engine):
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.HOH, age=45)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("21900")

    def test_base_lookup(self, engine):
        assert engine.base_standard_deduction(FilingStatus.QW) == Decimal("29200")
        assert engine.base_standard_deduction(FilingStatus.MFS) == Decimal("14600")


class TestAgeAndBlindness:
    def test_single_over_65(self, engine):
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.SINGLE, age=67)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("16150")

    def test_age_threshold_is_inclusive(self, engine):
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.SINGLE, age=65)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("16150")
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.SINGLE, age=64)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("14600")

    def test_single_over_65_and_blind(self, engine):
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.SINGLE, age=70, is_blind=True)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("17700")

    def test_joint_both_over_65_and_blind(self, engine):
        taxpayer = TaxpayerInfo(
            filing_status=FilingStatus.MFJ,
            age=70,
            spouse_age=68,
            is_blind=True,
            is_spouse_blind=True,
        )
        # 29,200 + 4 x 1,300
        assert engine.compute_standard_deduction(taxpayer) == Decimal("34400")

    def test_joint_spouse_only_over_65(self, engine):
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.MFJ, age=60, spouse_age=66)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("30500")

    def test_separate_uses_married_amount_without_spouse(self, engine):
        taxpayer = TaxpayerInfo(
            filing_status=FilingStatus.MFS,
            age=66,
            spouse_age=70,
            is_spouse_blind=True,
        )
        assert engine.compute_standard_deduction(taxpayer) == Decimal("15900")

    def test_spouse_ignored_outside_married_statuses(self, engine):
        taxpayer = TaxpayerInfo(
            filing_status=FilingStatus.HOH,
            age=40,
            spouse_age=80,
            is_spouse_blind=True,
        )
        assert engine.compute_standard_deduction(taxpayer) == Decimal("21900")

    def test_qualifying_widow_uses_unmarried_amount(self, engine):
        taxpayer = TaxpayerInfo(filing_status=FilingStatus.QW, age=66)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("30750")

    def test_breakdown(self, engine):
        taxpayer = TaxpayerInfo(
            filing_status=FilingStatus.MFJ, age=66, spouse_age=40, is_spouse_blind=True
        )
        extra = engine.additional_standard_deductions(taxpayer)
        assert extra.age_deduction == Decimal("1300")
        assert extra.blindness_deduction == Decimal("1300")
        assert extra.total == Decimal("2600")


class TestDependentFiler:
    @pytest.mark.parametrize("status", list(FilingStatus))
    def test_flat_minimum_for_every_status(self, engine, status):
        taxpayer = TaxpayerInfo(filing_status=status, age=19, can_be_claimed_as_dependent=True)
        assert engine.compute_standard_deduction(taxpayer) == Decimal("1300")

    def test_add_ons_do_not_apply(self, engine):
        taxpayer = TaxpayerInfo(
            filing_status=FilingStatus.SINGLE,
            age=70,
            is_blind=True,
            can_be_claimed_as_dependent=True,
        )
        assert engine.compute_standard_deduction(taxpayer) == Decimal("1300")
