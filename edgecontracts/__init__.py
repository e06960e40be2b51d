"""Data contracts for edge device services, with JSON encoding and validation."""

__version__ = "0.1.0"