"""Utility functions for autoledger."""

from autoledger.utils.date_parser import parse_date, month_bounds
from autoledger.utils.amount_parser import parse_amount, split_signed_amount

__all__ = ["parse_date", "month_bounds", "parse_amount", "split_signed_amount"]
