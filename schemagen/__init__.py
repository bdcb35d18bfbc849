"""Generates typed struct definitions from a relational database catalog."""

__version__ = "0.1.0"
