"""Naive recursive Fibonacci benchmark."""

__version__ = "0.1.0"
