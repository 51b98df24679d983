"""Taxpayer and dependent models."""

from datetime import date

from pydantic import BaseModel

from fedreturn.models.enums import FilingStatus


class TaxpayerInfo(BaseModel):
    filing_status: FilingStatus = FilingStatus.SINGLE
    age: int = 0
    spouse_age: int | None = None  # only read for MFJ
    is_blind: bool = False
    is_spouse_blind: bool = False  # only read for MFJ
    can_be_claimed_as_dependent: bool = False


class Dependent(BaseModel):
    name: str = ""
    ssn: str = ""
    relationship: str = ""
    birth_date: date | None = None
    is_qualifying_child: bool = False
    is_disabled: bool = False

    def age_in(self, year: int) -> int | None:
        """Calendar-year age (``year - birth year``), None without a birth date."""
        if self.birth_date is None:
            return None
        return year - self.birth_date.year
