"""Debt dashboard package."""
