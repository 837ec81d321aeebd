"""Classic array, string, stack, queue and tree algorithms."""

__version__ = "0.1.0"