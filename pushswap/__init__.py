"""Two-stack integer sorting with a restricted move set, and a printf-style formatter."""

__version__ = "1.0.0"
__all__ = ["__version__"]