"""fedreturn: federal income tax return calculator."""

__version__ = "0.1.0"
