"""Translation key diffing across locale folder trees."""

__version__ = "1.0.0"
