"""Building blocks for gateway services: a byte buffer, containers, substring search, timers, a thread pool, a service tree and a process supervisor."""

__version__ = "0.1.0"