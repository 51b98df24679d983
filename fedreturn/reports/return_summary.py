"""Return summary report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from fedreturn.models.enums import FilingStatus
from fedreturn.models.returns import ReturnResults

TEMPLATE_DIR = Path(__file__).parent / "templates"


def money(value: Decimal) -> str:
    return f"${value:,.2f}"


def percent(rate: Decimal) -> str:
    return f"{rate * 100:.1f}%"


class ReturnSummaryGenerator:
    """Generates a human-readable summary of a calculated return."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)), trim_blocks=True, lstrip_blocks=True
        )
        self.env.filters["money"] = money
        self.env.filters["percent"] = percent

    def render(self, results: ReturnResults, filing_status: FilingStatus, tax_year: int) -> str:
        """Render the return summary using the Jinja2 template."""
        template = self.env.get_template("return_summary.txt")
        return template.render(r=results, filing_status=filing_status, tax_year=tax_year)
