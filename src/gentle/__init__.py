"""Gentle design tokens: spec model, theme resolution and serialization."""

__version__ = "0.2.1"
