"""ConvertiGo! interactive currency converter."""

__version__ = "1.0.0"
