"""Booking & availability engine for a peer-to-peer rental marketplace."""

__version__ = "0.1.0"
