"""Report generation for fedreturn."""

from fedreturn.reports.return_summary import ReturnSummaryGenerator

__all__ = ["ReturnSummaryGenerator"]
