"""Small console programs for employee records, recycling rewards, number series and simple analyses."""

__version__ = "0.1.0"