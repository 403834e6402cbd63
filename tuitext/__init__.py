"""Styled text primitives for terminal user interfaces: styles, symbols and text."""

__version__ = "0.1.0"
__all__ = ["style", "symbols", "text"]