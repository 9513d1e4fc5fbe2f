"""Objects Checker: validates objects catalog files before they are consumed."""

__version__ = "1.0.0"
