"""Browse and play every 2048 board by its protoboard and tile IDs."""

__version__ = "0.1.0"