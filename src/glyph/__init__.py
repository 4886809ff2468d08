"""glyph: interactive git helpers for trunk-based workflows."""

__version__ = "0.1.0"
