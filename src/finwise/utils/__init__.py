"""Utility functions for finwise."""

from finwise.utils.amount_parser import parse_amount

__all__ = ["parse_amount"]
