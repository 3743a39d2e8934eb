"""Target selection domain types."""
