"""runin: run a command in multiple directories at once."""

__version__ = "0.1.0"
