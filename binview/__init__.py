# binview/__init__.py
"""Dump a run of fixed-width numbers from a binary file as text."""

__version__ = "0.1.0"
