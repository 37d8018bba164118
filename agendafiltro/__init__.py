"""Read an appointment agenda, compute priorities and write report files."""

__version__ = "0.1.0"