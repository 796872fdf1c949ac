"""Π Stability Index dashboard: data loading, display metrics and zone charts."""

__version__ = "0.1.0"
