"""Marginal tax bracket model."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class TaxBracket(BaseModel):
    """One marginal bracket: income in (lower_bound, upper_bound] is taxed at rate."""

    model_config = ConfigDict(frozen=True)

    lower_bound: Decimal
    upper_bound: Decimal | None  # None for the unbounded top bracket
    rate: Decimal

    @property
    def width(self) -> Decimal | None:
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound

    def contains(self, income: Decimal) -> bool:
        if income <= self.lower_bound:
            return False
        return self.upper_bound is None or income <= self.upper_bound
