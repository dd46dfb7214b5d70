"""WikiSearch - boolean result algebra over per-term relevance maps"""

__version__ = "0.1.0"
