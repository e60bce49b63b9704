"""Worked programming drills as importable Python code."""

__version__ = "4.6.0"