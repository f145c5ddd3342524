"""Member directory service: Portal API member lookups with mock-data fallback."""

__version__ = "1.0.0"
