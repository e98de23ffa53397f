"""Interactive space-time diagram of a travelling transverse wave pulse."""

__version__ = "0.1.0"
