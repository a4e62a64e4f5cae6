"""A side-scrolling arcade shooter with monster waves and comet showers, on pygame."""

__version__ = "0.1.0"