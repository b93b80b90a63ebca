"""Console bus booking system for passengers, bus operators and administrators."""

__version__ = "0.1.0"
__all__ = ["__version__"]