"""Classic algorithms, small containers, expression tools and text patterns."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "containers", "expressions", "grid", "patterns", "sorting"]