"""Customer image upload API."""

__version__ = "1.0.0"
