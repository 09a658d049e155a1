"""Docs Hub: brain dump -> staging -> docs content pipeline."""

__version__ = "0.1.0"
