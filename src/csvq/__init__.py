"""CSV to analysis questions pipeline."""

__version__ = "0.1.0"
