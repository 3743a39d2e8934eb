"""Execution domain types."""
