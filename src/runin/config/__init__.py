"""Configuration discovery, parsing and run settings."""
