"""Tax form data models (W-2)."""

from decimal import Decimal

from pydantic import BaseModel


class W2(BaseModel):
    """Wage and Tax Statement.

    Boxes 3-6 are carried for display only; the return calculation reads
    Box 1 wages and Box 2 federal withholding. Amounts are not range-checked
    here so that ``validate_return_inputs`` can report them.
    """

    employer_name: str = ""
    employer_ein: str = ""
    box1_wages: Decimal = Decimal("0")
    box2_federal_withheld: Decimal = Decimal("0")
    box3_ss_wages: Decimal | None = None
    box4_ss_withheld: Decimal | None = None
    box5_medicare_wages: Decimal | None = None
    box6_medicare_withheld: Decimal | None = None
