"""Host platform descriptor: normalized OS, architecture and runtime facts."""

__version__ = "0.1.0"
