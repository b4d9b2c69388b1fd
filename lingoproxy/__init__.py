"""LingoProxy: translation proxy and heuristic language detection API."""

__version__ = "1.0.0"
