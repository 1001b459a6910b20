"""A console prime-number checker, form validation, client IP detection and a small Flask web application."""

__version__ = "0.1.0"
__all__ = ["form", "network", "prime", "web"]