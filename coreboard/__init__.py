"""Core vocabulary board generation for AAC."""

__version__ = "0.1.0"
