"""Signed 32-bit fixed-point numbers with 8 fractional bits, and a demo command."""

__version__ = "1.0.0"
__all__ = ["__version__"]