"""Settings schema and settings-page layout for the Jumplinks redirect module."""

__version__ = "1.0.0"
