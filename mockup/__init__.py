"""Product mockup compositing and generation backend."""

__version__ = "0.1.0"
