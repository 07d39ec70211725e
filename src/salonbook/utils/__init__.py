"""Utility functions for salonbook."""

from salonbook.utils.date_parser import parse_date, month_bounds, get_date_range
from salonbook.utils.amount_parser import parse_amount

__all__ = ["parse_date", "month_bounds", "get_date_range", "parse_amount"]
