"""Typer CLI interface for fedreturn."""

import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from fedreturn.engines.brackets import TAX_YEAR
from fedreturn.engines.income_tax import IncomeTaxEngine
from fedreturn.engines.returns import ReturnCalculator
from fedreturn.exceptions import DataValidationError
from fedreturn.models.enums import FilingStatus
from fedreturn.models.returns import ReturnInputs, ReturnResults
from fedreturn.reports.return_summary import ReturnSummaryGenerator, money, percent

app = typer.Typer(
    name="fedreturn",
    help="fedreturn: federal income tax return calculator.",
)

STATUS_ALIASES = {
    "SINGLE": FilingStatus.SINGLE,
    "MFJ": FilingStatus.MFJ,
    "MFS": FilingStatus.MFS,
    "HOH": FilingStatus.HOH,
    "QW": FilingStatus.QW,
}


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """fedreturn: federal income tax return calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def load_inputs(path: Path) -> ReturnInputs:
    """Read a ReturnInputs JSON document."""
    try:
        raw = path.read_text()
    except OSError as exc:
        raise DataValidationError(str(path), f"cannot read file ({exc.strerror})") from exc
    try:
        return ReturnInputs.model_validate_json(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise DataValidationError(str(path), problems) from exc


def _parse_status(value: str) -> FilingStatus:
    key = value.upper()
    if key in STATUS_ALIASES:
        return STATUS_ALIASES[key]
    try:
        return FilingStatus(key)
    except ValueError:
        valid = ", ".join(STATUS_ALIASES)
        typer.echo(f"Error: Invalid filing status '{value}'. Valid: {valid}", err=True)
        raise typer.Exit(1)


def _load_or_exit(path: Path) -> ReturnInputs:
    try:
        return load_inputs(path)
    except DataValidationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _print_results(console: Console, results: ReturnResults) -> None:
    tbl = Table(title=f"Federal Return {TAX_YEAR}", show_header=False, padding=(0, 1))
    tbl.add_column("", style="cyan", min_width=28)
    tbl.add_column("", justify="right", style="green")
    tbl.add_row("Adjusted Gross Income", money(results.adjusted_gross_income))
    tbl.add_row("Standard Deduction", f"-{money(results.standard_deduction)}")
    tbl.add_row("Taxable Income", money(results.taxable_income))
    tbl.add_row("Tax Before Credits", money(results.gross_tax))
    tbl.add_row("Child Tax Credit", f"-{money(results.child_tax_credit)}")
    if results.credit_for_other_dependents > 0:
        tbl.add_row(
            "Credit for Other Dependents", f"-{money(results.credit_for_other_dependents)}"
        )
    if results.earned_income_credit > 0:
        tbl.add_row("Earned Income Credit (est.)", f"-{money(results.earned_income_credit)}")
    tbl.add_row("Income Tax", money(results.income_tax))
    tbl.add_row("Total Withheld", money(results.total_tax_withheld))
    if results.is_refund:
        tbl.add_row("Refund", money(results.refund_or_amount_due))
    else:
        tbl.add_row("Amount Due", money(results.amount_due))
    tbl.add_row("Effective Tax Rate", percent(results.effective_tax_rate))
    tbl.add_row("Marginal Tax Rate", percent(results.marginal_tax_rate))
    console.print(tbl)


@app.command()
def calculate(
    inputs_file: Path = typer.Argument(..., help="JSON file with the return inputs"),
    as_of_year: int | None = typer.Option(
        None,
        "--as-of-year",
        help="Year used to age dependents (defaults to the current year)",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with an error instead of calculating when inputs are invalid"
    ),
    report: bool = typer.Option(False, "--report", help="Print a plain-text summary report"),
) -> None:
    """Calculate a federal return from a JSON inputs file."""
    inputs = _load_or_exit(inputs_file)
    calculator = ReturnCalculator(as_of_year=as_of_year)

    errors = calculator.validate(inputs)
    for message in errors:
        typer.echo(f"Warning: {message}", err=True)
    if errors and strict:
        raise typer.Exit(1)

    results = calculator.calculate_if_ready(inputs)
    if results is None:
        typer.echo("No results yet: add taxpayer information and at least one W-2.")
        return

    if report:
        generator = ReturnSummaryGenerator()
        typer.echo(generator.render(results, inputs.taxpayer_info.filing_status, TAX_YEAR))
    else:
        _print_results(Console(), results)


@app.command()
def validate(
    inputs_file: Path = typer.Argument(..., help="JSON file with the return inputs"),
) -> None:
    """Check a return inputs file and list any problems."""
    inputs = _load_or_exit(inputs_file)
    errors = ReturnCalculator.validate(inputs)
    if not errors:
        typer.echo("Inputs are valid.")
        return
    for message in errors:
        typer.echo(f"- {message}")
    raise typer.Exit(1)


@app.command()
def brackets(
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE, MFJ, MFS, HOH, QW",
    ),
) -> None:
    """Show the federal bracket schedule for a filing status."""
    status = _parse_status(filing_status)
    engine = IncomeTaxEngine()

    tbl = Table(title=f"{TAX_YEAR} Brackets ({status.value})", show_header=True)
    tbl.add_column("Over", justify="right", style="cyan")
    tbl.add_column("Up to", justify="right", style="cyan")
    tbl.add_column("Rate", justify="right", style="green")
    for bracket in engine.brackets(status):
        upper = "-" if bracket.upper_bound is None else money(bracket.upper_bound)
        tbl.add_row(money(bracket.lower_bound), upper, percent(bracket.rate))
    Console().print(tbl)


@app.command()
def schema() -> None:
    """Print the JSON schema of the inputs file."""
    typer.echo(json.dumps(ReturnInputs.model_json_schema(), indent=2))
