"""Live camera spectrum viewer with zoom, pan and a row intensity profile."""

__version__ = "0.1.0"