"""localeroute — locale-aware route normalization."""

__version__ = "0.1.0"
