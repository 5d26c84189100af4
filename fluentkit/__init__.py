"""Fluent-style widget descriptions, colour themes and a text input editing model."""

__version__ = "0.1.0"