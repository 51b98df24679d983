"""Shared test fixtures for fedreturn."""

from datetime import date
from decimal import Decimal

import pytest

from fedreturn.models.enums import FilingStatus
from fedreturn.models.returns import ReturnInputs
from fedreturn.models.tax_forms import W2
from fedreturn.models.taxpayer import Dependent, TaxpayerInfo

AS_OF_YEAR = 2024


@pytest.fixture
def single_taxpayer() -> TaxpayerInfo:
    return TaxpayerInfo(filing_status=FilingStatus.SINGLE, age=30)


@pytest.fixture
def joint_taxpayer() -> TaxpayerInfo:
    return TaxpayerInfo(filing_status=FilingStatus.MFJ, age=40, spouse_age=38)


@pytest.fixture
def sample_w2() -> W2:
    return W2(
        employer_name="Test Company",
        employer_ein="12-3456789",
        box1_wages=Decimal("60000"),
        box2_federal_withheld=Decimal("8000"),
        box3_ss_wages=Decimal("60000"),
        box4_ss_withheld=Decimal("3720"),
        box5_medicare_wages=Decimal("60000"),
        box6_medicare_withheld=Decimal("870"),
    )


@pytest.fixture
def young_child() -> Dependent:
    return Dependent(
        name="Child One",
        ssn="123-45-6789",
        relationship="Son",
        birth_date=date(2015, 1, 1),
        is_qualifying_child=True,
    )


@pytest.fixture
def elderly_parent() -> Dependent:
    return Dependent(
        name="Parent One",
        ssn="987-65-4321",
        relationship="Mother",
        birth_date=date(1950, 6, 15),
        is_qualifying_child=False,
    )


@pytest.fixture
def single_return(single_taxpayer: TaxpayerInfo, sample_w2: W2) -> ReturnInputs:
    return ReturnInputs(
        taxpayer_info=single_taxpayer,
        w2_forms=[sample_w2],
        dependents=[],
        interest_income=Decimal("500"),
        estimated_tax_payments=Decimal("1000"),
    )
