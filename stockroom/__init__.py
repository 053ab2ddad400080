"""Stockroom: inventory and user management with console and HTTP front ends."""

__version__ = "0.1.0"
