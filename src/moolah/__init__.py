"""Moolah - a local, command-line personal finance tracker."""

__version__ = "0.1.0"
