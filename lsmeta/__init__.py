"""File metadata collection, rendering and sorting for directory listings."""

__version__ = "0.1.0"