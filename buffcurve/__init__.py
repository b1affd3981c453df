"""buffcurve: effective-multiplier curves for recurring ability casts."""

__version__ = "0.1.0"
