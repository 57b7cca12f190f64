"""Client library for the MEXC spot and futures REST APIs."""

__version__ = "0.1.0"