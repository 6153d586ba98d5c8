"""Ordered list structures with 1-based positions: sequential lists and singly, doubly and circular linked lists."""

__version__ = "0.1.0"