"""SQLite chat memory stores, admin web helpers and vector index planning."""

__version__ = "0.1.0"