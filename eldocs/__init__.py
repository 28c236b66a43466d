"""eldocs: structural documentation generator for Java source trees."""

__version__ = "0.3.0"
