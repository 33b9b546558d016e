"""Translation resolution and fallback engine for the PDF toolkit."""

__version__ = "0.1.0"
