"""Packet capture with protocol statistics and a live terminal dashboard."""

__version__ = "0.1.0"