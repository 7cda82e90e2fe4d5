"""Binary search tree over pluggable element types, with a line-oriented command menu."""

__version__ = "0.1.0"
__all__ = ["elements", "tree", "menu"]