"""Credential lifecycle and permission evaluation core."""

__version__ = "0.1.0"
