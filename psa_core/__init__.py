"""Public-safety incident reporting core."""

__version__ = "0.1.0"
