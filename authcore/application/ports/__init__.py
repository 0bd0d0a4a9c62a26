"""Ports (interfaces) of the application layer."""
