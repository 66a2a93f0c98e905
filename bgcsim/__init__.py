"""Daily process routines, input readers and output helpers for a point ecosystem biogeochemistry model."""

__version__ = "0.1.0"