"""Library version reporting and comparison."""

__version__ = "2.14.1"
__all__ = ["__version__"]