"""Minimum-weight cycle breaking for weighted graphs, with an input generator and usage meter."""

__version__ = "0.1.0"