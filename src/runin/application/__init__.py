"""Application layer orchestrating feature use cases."""
