"""SLOW protocol packets, payload fragmentation and session identifiers."""

__version__ = "0.1.0"
__all__ = ["fragmenter", "packet", "uuid_generator"]