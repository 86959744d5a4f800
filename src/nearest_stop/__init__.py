"""Find the nearest transit stop and its next scheduled arrival."""

__version__ = "0.1.0"
