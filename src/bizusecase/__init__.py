"""Score, rank and cost out AI-adoption use cases for business domains."""

__version__ = "1.0.0"
