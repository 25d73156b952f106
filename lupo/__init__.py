"""Local tab-separated store for trades and stock metadata."""

__version__ = "0.1.0"
