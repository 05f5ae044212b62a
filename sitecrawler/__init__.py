"""Concurrent single-site web crawler with an internal-link report."""

__version__ = "0.1.0"
__all__ = ["__version__"]