"""Term deposit compounding calculator."""

__version__ = "0.1.0"
