"""Data types for Wayback Machine CDX index results."""

__version__ = "0.1.0"
__all__ = ["cdx", "digest", "entry", "mime_type", "redirect", "surt", "timestamp"]