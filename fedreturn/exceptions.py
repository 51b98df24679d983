"""Custom exceptions for fedreturn."""


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class BracketTableError(TaxComputationError):
    """Raised when a bracket table does not partition [0, inf).

    This is a configuration defect and is raised when the tables load.
    """

    def __init__(self, tax_year: int, filing_status: str, message: str):
        self.tax_year = tax_year
        self.filing_status = filing_status
        super().__init__(f"Bracket table {tax_year}/{filing_status}: {message}")


class MissingTaxpayerInfoError(TaxComputationError):
    """Raised when a return is calculated without taxpayer information."""

    def __init__(self) -> None:
        super().__init__("Cannot calculate a return without taxpayer information")


class DataValidationError(TaxComputationError):
    """Raised when input data cannot be loaded."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")
