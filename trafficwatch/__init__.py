"""Data types and analysis helpers for monitoring network traffic."""

__version__ = "0.1.0"

__all__ = [
    "addresses",
    "alerts",
    "notifications",
    "packets",
    "protocols",
    "records",
    "traffic",
]