"""A segment tree, a stack, two in-memory JSON HTTP services, a coding-agent launcher and a feature tour."""

__version__ = "0.1.0"