"""Classic data structures, algorithms and small simulations."""

__version__ = "0.1.0"